from uuid import uuid4


class UuidIdGenerator:
    """Production id source: random UUID4 strings."""

    def new_id(self) -> str:
        return str(uuid4())
