"""
Chain of Responsibility pattern: purchase requests climbing an approval chain.

Each approver either decides a request or hands it to the next one. The first
approver whose limit covers the amount approves it; a request that reaches the
end of the chain unapproved is rejected.
"""
from abc import ABC
from dataclasses import dataclass
from typing import Optional, Union
from utils.logging_config import get_logger
from utils.exceptions import ValidationError
from validation.validators import TypeValidator, validate_non_negative

logger = get_logger(__name__)

Amount = Union[int, float]


@dataclass(frozen=True)
class PurchaseRequest:
    purpose: str
    amount: Amount


@dataclass(frozen=True)
class ApprovalDecision:
    """Outcome of sending a request down the chain."""
    request: PurchaseRequest
    approved: bool
    approver: Optional[str] = None

    @property
    def message(self) -> str:
        if self.approved:
            return f"{self.approver} approved the purchase of {self.request.purpose}."
        return (
            f"Request for {self.request.amount} {self.request.purpose} "
            f"cannot be approved."
        )


class Approver(ABC):
    """Base handler holding the link to the next approver."""

    title = "Approver"

    def __init__(self):
        self._next: Optional['Approver'] = None

    @property
    def next_approver(self) -> Optional['Approver']:
        return self._next

    def set_next(self, approver: 'Approver') -> 'Approver':
        """Link the next approver and return it so calls can be chained."""
        self._next = approver
        return approver

    def can_approve(self, request: PurchaseRequest) -> bool:
        return False

    def process_request(self, request: PurchaseRequest) -> ApprovalDecision:
        if self.can_approve(request):
            logger.info(f"{self.title} approved {request.purpose} ({request.amount})")
            return ApprovalDecision(request, approved=True, approver=self.title)

        if self._next is not None:
            return self._next.process_request(request)

        logger.warning(f"No approver for {request.purpose} ({request.amount})")
        return ApprovalDecision(request, approved=False)


class LimitedApprover(Approver):
    """Approver that signs off on amounts up to a fixed limit."""

    default_limit: Amount = 0

    def __init__(self, limit: Optional[Amount] = None):
        super().__init__()
        if limit is None:
            limit = self.default_limit
        name = f"{self.title} limit"
        self.limit = validate_non_negative(TypeValidator((int, float), name=name)(limit), name=name)

    def can_approve(self, request: PurchaseRequest) -> bool:
        return request.amount <= self.limit


class DepartmentManager(LimitedApprover):
    title = "Department Manager"
    default_limit = 1000


class FinanceManager(LimitedApprover):
    title = "Finance Manager"
    default_limit = 5000


class CEO(Approver):
    """Terminal approver with no limit."""

    title = "CEO"

    def can_approve(self, request: PurchaseRequest) -> bool:
        return True


def build_approval_chain(
    department_limit: Amount = DepartmentManager.default_limit,
    finance_limit: Amount = FinanceManager.default_limit,
    include_ceo: bool = True
) -> Approver:
    """
    Build department -> finance (-> CEO) and return the head of the chain.

    Raises:
        ValidationError: If the department limit exceeds the finance limit,
            which would leave the finance manager nothing to approve.
    """
    head = DepartmentManager(department_limit)
    finance = FinanceManager(finance_limit)
    if head.limit > finance.limit:
        raise ValidationError(
            f"department_limit ({head.limit}) must not exceed finance_limit ({finance.limit})",
            details={'department_limit': head.limit, 'finance_limit': finance.limit}
        )

    tail = head.set_next(finance)
    if include_ceo:
        tail.set_next(CEO())
    return head


def main(department_limit: Amount = 1000, finance_limit: Amount = 5000):
    """Send three purchase requests through the standard chain."""
    approver = build_approval_chain(department_limit, finance_limit)

    requests = [
        PurchaseRequest("Laptops", 800),
        PurchaseRequest("Office Supplies", 3000),
        PurchaseRequest("New Furniture", 10000),
    ]

    for request in requests:
        print(f"Processing purchase request for {request.purpose} of ${request.amount}:")
        print(approver.process_request(request).message)
        print()


if __name__ == "__main__":
    main()
