"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


def sale_not_found(sale_id: int) -> str:
    """Return message for missing sale."""
    return f"Sale {sale_id} not found"


def expense_not_found(expense_id: int) -> str:
    """Return message for missing expense."""
    return f"Expense {expense_id} not found"


def product_not_found(product_id: int) -> str:
    """Return message for missing product."""
    return f"Product {product_id} not found"


def entity_not_found(kind: str, entity_id: int) -> str:
    """Return message for a missing catalog entity."""
    return f"{kind} {entity_id} not found"


def duplicate_name(kind: str, name: str) -> str:
    """Return message for a duplicate catalog name."""
    return f"{kind} with name '{name}' already exists"


def invalid_date(value: str) -> str:
    """Return message for a date that is not yyyy-MM-dd."""
    return f"Invalid date '{value}': expected YYYY-MM-DD"


def group_in_use(group_id: int, service_count: int) -> str:
    """Return message when a service group still has services."""
    return (
        f"Cannot delete service group {group_id}: it has "
        f"{service_count} service{'s' if service_count != 1 else ''}. "
        "Please reassign or delete them first."
    )
