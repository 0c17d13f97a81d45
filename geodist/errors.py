"""
Failure values returned at the validation and calculation boundaries
"""

__all__ = ['ErrorKind', 'Failure']

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """The categories of failure a single distance request can end in"""
    INVALID_ARGUMENTS = 'invalid_arguments'
    NUMERIC_DOMAIN_FAULT = 'numeric_domain_fault'
    UNEXPECTED_COMPUTATION_FAULT = 'unexpected_computation_fault'


@dataclass(frozen=True)
class Failure:
    """
    A named failure, returned in place of a result.

    Args:
        kind:
            The ErrorKind of the failure

        message:
            A human-readable description

        operation:
            (Optional) The name of the operation that failed
    """
    kind: ErrorKind
    message: str
    operation: str = ''

    def __str__(self):
        if self.operation:
            return f'[EXCEPTION][{self.operation}] {self.message}'
        return f'[EXCEPTION] {self.message}'
