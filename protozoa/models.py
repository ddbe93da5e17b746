"""Data models for the inbound blockchain boundary."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class BlockData(BaseModel):
    """A block as supplied by the external blockchain-data collaborator.

    Only the fields the core needs are modelled. Bitcoin-specific checks
    (hash format, height bounds) belong to the collaborator and happen before
    a block reaches the entropy source.
    """

    model_config = ConfigDict(frozen=True)

    hash: str = Field(min_length=1)
    height: int = Field(ge=0)
    nonce: int = Field(ge=0, lt=2**64)
    difficulty: float = Field(default=1.0, ge=0.0)

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "BlockData":
        """Build from a block-explorer style payload (``height``/``hash``/``nonce``/``difficulty``)."""
        return cls(
            hash=payload["hash"],
            height=payload["height"],
            nonce=payload["nonce"],
            difficulty=payload.get("difficulty", 1.0),
        )
