"""Test principals — ids the upstream auth gateway would hand us."""

from notekeeper.core.domain_types import PrincipalId

ALICE = PrincipalId(1)
BOB = PrincipalId(2)
NOBODY = PrincipalId(99)


def as_principal(principal_id: int) -> dict:
    """Headers the upstream auth gateway would attach."""
    return {"X-Principal-ID": str(principal_id)}
