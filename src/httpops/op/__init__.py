r"""HTTP service operations."""

from __future__ import annotations

__all__ = [
    "AuthenticableClientStatus",
    "AuthenticatedOperation",
    "AuthenticationAutoRenewalPolicy",
    "AuthenticationOperation",
    "BaseHttpServiceOperation",
    "OperationResponseHandler",
    "RenewOnceAutoRenewalPolicy",
    "ServiceClient",
    "StatusDependentOperation",
    "StatusIndependentOperation",
]

from httpops.op.auth import (
    AuthenticableClientStatus,
    AuthenticatedOperation,
    AuthenticationAutoRenewalPolicy,
    AuthenticationOperation,
    RenewOnceAutoRenewalPolicy,
)
from httpops.op.base import BaseHttpServiceOperation, ServiceClient
from httpops.op.handler import OperationResponseHandler
from httpops.op.status_dependent import StatusDependentOperation
from httpops.op.status_independent import StatusIndependentOperation
