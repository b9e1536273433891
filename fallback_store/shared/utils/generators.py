"""Record id generation."""

from cuid2 import cuid_wrapper

_next_id = cuid_wrapper()


def generate_cuid() -> str:
    """Return a fresh CUID2 for a record created at runtime.

    Only sign-up mints ids this way; seed records keep fixed, readable ids
    such as "test-participant-001".
    """
    return str(_next_id())
