"""
Creational design patterns.
"""
from . import abstract_factory, builder, factory, prototype, singleton
from .abstract_factory import (
    Button,
    Checkbox,
    GUIFactory,
    WindowsFactory,
    MacOSFactory,
    Platform,
    factory_for,
    render_widgets
)
from .builder import Builder, Computer, ComputerBuilder, ComputerDirector
from .factory import (
    Factory,
    LoggerType,
    MessageLogger,
    MessageLoggerFactory,
    ConsoleLogger,
    FileLogger,
    register_logger
)
from .prototype import (
    Prototype,
    CircleShape,
    RectangleShape,
    ContractDocument,
    PrototypeRegistry
)
from .singleton import InstanceRegistry, Database

DEMOS = {
    'abstract_factory': abstract_factory.main,
    'builder': builder.main,
    'factory': factory.main,
    'prototype': prototype.main,
    'singleton': singleton.main,
}

__all__ = [
    'Button',
    'Checkbox',
    'GUIFactory',
    'WindowsFactory',
    'MacOSFactory',
    'Platform',
    'factory_for',
    'render_widgets',
    'Builder',
    'Computer',
    'ComputerBuilder',
    'ComputerDirector',
    'Factory',
    'LoggerType',
    'MessageLogger',
    'MessageLoggerFactory',
    'ConsoleLogger',
    'FileLogger',
    'register_logger',
    'Prototype',
    'CircleShape',
    'RectangleShape',
    'ContractDocument',
    'PrototypeRegistry',
    'InstanceRegistry',
    'Database',
    'DEMOS',
]
