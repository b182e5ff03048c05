import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List


class KeyFormat(str, Enum):
    HEX = "hex"
    BASE64 = "base64"


@dataclass
class DealerConfig:
    threshold: int
    participants: int
    first_index: int = 1
    output_dir: str = "keys"
    key_format: KeyFormat = KeyFormat.HEX

    @classmethod
    def from_file(cls, path: Path) -> "DealerConfig":
        return cls.from_dict(json.loads(Path(path).read_text()))

    @classmethod
    def from_dict(cls, data: Dict) -> "DealerConfig":
        if not isinstance(data, dict):
            raise ValueError(f"Dealer config must be a JSON object, got {type(data).__name__}")
        try:
            threshold = int(data["threshold"])
            participants = int(data["participants"])
            first_index = int(data.get("first_index", 1))
        except KeyError as exc:
            raise ValueError(f"Dealer config missing required field {exc}") from exc
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Dealer config fields must be integers: {exc}") from exc
        if threshold < 0:
            raise ValueError("Dealer threshold must be non-negative")
        if participants <= threshold:
            raise ValueError("Dealer config must satisfy 0 <= threshold < participants")
        if first_index < 1:
            raise ValueError("first_index must be at least 1 (index 0 is the master key)")
        output_dir = str(data.get("output_dir", "keys")).strip()
        if not output_dir:
            raise ValueError("output_dir cannot be empty")
        try:
            key_format = KeyFormat(str(data.get("key_format", "hex")))
        except ValueError as exc:
            raise ValueError(f"Unknown key format '{data.get('key_format')}'") from exc
        return cls(
            threshold=threshold,
            participants=participants,
            first_index=first_index,
            output_dir=output_dir,
            key_format=key_format,
        )

    @property
    def indices(self) -> List[int]:
        """Participant indices, one per share."""
        return list(range(self.first_index, self.first_index + self.participants))
