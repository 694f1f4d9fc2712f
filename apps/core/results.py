from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from rest_framework import status
from rest_framework.response import Response


class ErrorKind(str, Enum):
    """Tipos de erro que os serviços devolvem para quem chamou."""

    VALIDATION = 'validation'
    UNAUTHORIZED = 'unauthorized'
    NOT_FOUND = 'not_found'
    CONFLICT = 'conflict'
    UPSTREAM_FAILURE = 'upstream_failure'


HTTP_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UPSTREAM_FAILURE: status.HTTP_502_BAD_GATEWAY,
}


@dataclass
class OperationResult:
    """
    Resultado uniforme das operações de serviço: {success, data?, error?}.
    Em caso de falha, error_kind permite decidir sem comparar mensagens.
    """

    success: bool
    data: Any = None
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, data=None):
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, kind, message):
        return cls(success=False, error=message, error_kind=kind)

    @property
    def http_status(self):
        if self.success:
            return status.HTTP_200_OK
        return HTTP_STATUS_BY_KIND.get(self.error_kind, status.HTTP_500_INTERNAL_SERVER_ERROR)

    def error_response(self):
        return Response({
            'success': False,
            'message': self.error,
            'error_kind': self.error_kind.value if self.error_kind else None,
        }, status=self.http_status)
