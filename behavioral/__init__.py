"""
Behavioral design patterns.
"""
from . import chain, command, memento, observer, state, strategy, template, visitor
from .chain import (
    PurchaseRequest,
    ApprovalDecision,
    Approver,
    DepartmentManager,
    FinanceManager,
    CEO,
    build_approval_chain
)
from .command import Command, Chef, PrepareDishCommand, Waiter
from .memento import TextEditorMemento, TextEditor, Caretaker
from .observer import (
    Observer,
    Subject,
    NewsAgency,
    Subscriber,
    CallbackObserver
)
from .state import TCPConnection, TCPState, ClosedState, EstablishedState
from .strategy import (
    PaymentStrategy,
    CreditCardStrategy,
    PayPalStrategy,
    PaymentContext
)
from .template import BrewingSteps, TeaSteps, CoffeeSteps, make_beverage
from .visitor import (
    Circle,
    Rectangle,
    area,
    perimeter,
    describe_area,
    describe_perimeter,
    apply_operation
)

DEMOS = {
    'chain_of_responsibility': chain.main,
    'command': command.main,
    'memento': memento.main,
    'observer': observer.main,
    'state': state.main,
    'strategy': strategy.main,
    'template': template.main,
    'visitor': visitor.main,
}

__all__ = [
    'PurchaseRequest',
    'ApprovalDecision',
    'Approver',
    'DepartmentManager',
    'FinanceManager',
    'CEO',
    'build_approval_chain',
    'Command',
    'Chef',
    'PrepareDishCommand',
    'Waiter',
    'TextEditorMemento',
    'TextEditor',
    'Caretaker',
    'Observer',
    'Subject',
    'NewsAgency',
    'Subscriber',
    'CallbackObserver',
    'TCPConnection',
    'TCPState',
    'ClosedState',
    'EstablishedState',
    'PaymentStrategy',
    'CreditCardStrategy',
    'PayPalStrategy',
    'PaymentContext',
    'BrewingSteps',
    'TeaSteps',
    'CoffeeSteps',
    'make_beverage',
    'Circle',
    'Rectangle',
    'area',
    'perimeter',
    'describe_area',
    'describe_perimeter',
    'apply_operation',
    'DEMOS',
]
