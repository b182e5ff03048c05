"""
Trusted-dealer key generation and key file I/O.

The dealer draws a ``SecretKeySet`` for the configured threshold, hands out one
``SecretKeyShare`` per participant index and publishes the ``PublicKeySet``.
"""

from __future__ import annotations

import base64
import json
import os
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from .config import DealerConfig, KeyFormat
from .keys import PublicKeySet, SecretKeySet, SecretKeyShare
from .utils import get_logger

logger = get_logger(__name__)

PUBLIC_KEYS_FILENAME = "public-keys.json"


@dataclass
class DealtKeys:
    public_keys: PublicKeySet
    shares: Dict[int, SecretKeyShare]

    def zeroize(self) -> None:
        for share in self.shares.values():
            share.zeroize()


def deal(config: DealerConfig, rng: Optional[random.Random] = None) -> DealtKeys:
    """Generate a key set and issue one share per configured participant index."""
    with SecretKeySet.random(config.threshold, rng) as sk_set:
        shares = {index: sk_set.secret_key_share(index) for index in config.indices}
        public_keys = sk_set.public_keys()
    logger.info(
        "Dealt %d shares with threshold %d (indices %d..%d)",
        len(shares),
        config.threshold,
        config.indices[0],
        config.indices[-1],
    )
    return DealtKeys(public_keys=public_keys, shares=shares)


def _encode(data: bytes, key_format: KeyFormat) -> str:
    if key_format == KeyFormat.BASE64:
        return base64.b64encode(data).decode("ascii")
    return data.hex()


def _decode(text: str, key_format: KeyFormat) -> bytes:
    if key_format == KeyFormat.BASE64:
        return base64.b64decode(text, validate=True)
    return bytes.fromhex(text)


def _write_private(path: Path, text: str) -> None:
    """Write ``text`` to a file that is created owner-only, never readable by others."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    os.fchmod(fd, 0o600)
    with os.fdopen(fd, "w") as handle:
        handle.write(text)


def write_key_files(dealt: DealtKeys, config: DealerConfig, base_dir: Optional[Path] = None) -> Dict[str, Path]:
    """
    Write ``public-keys.json`` and one ``share-<index>.json`` per participant.

    Returns the written paths keyed by ``"public"`` and ``"share-<index>"``.
    """
    output_dir = Path(base_dir or Path.cwd()) / config.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)
    written: Dict[str, Path] = {}

    public_doc = {
        "format": config.key_format.value,
        "threshold": dealt.public_keys.threshold(),
        "public_key": _encode(dealt.public_keys.public_key().to_bytes(), config.key_format),
        "public_key_set": _encode(dealt.public_keys.to_bytes(), config.key_format),
    }
    public_path = output_dir / PUBLIC_KEYS_FILENAME
    public_path.write_text(json.dumps(public_doc, indent=2))
    written["public"] = public_path

    for index, share in sorted(dealt.shares.items()):
        share_doc = {
            "format": config.key_format.value,
            "index": index,
            "secret_key_share": _encode(share.to_bytes(), config.key_format),
        }
        share_path = output_dir / f"share-{index}.json"
        _write_private(share_path, json.dumps(share_doc, indent=2))
        written[f"share-{index}"] = share_path
    logger.info("Wrote %d key files to %s", len(written), output_dir)
    return written


def load_public_key_set(path: Path) -> PublicKeySet:
    doc = json.loads(Path(path).read_text())
    key_format = KeyFormat(doc.get("format", "hex"))
    return PublicKeySet.from_bytes(_decode(doc["public_key_set"], key_format))


def load_secret_key_share(path: Path) -> SecretKeyShare:
    doc = json.loads(Path(path).read_text())
    key_format = KeyFormat(doc.get("format", "hex"))
    share = SecretKeyShare.from_bytes(_decode(doc["secret_key_share"], key_format))
    if share.index != int(doc["index"]):
        raise ValueError(f"Share file {path} declares index {doc['index']} but encodes {share.index}")
    return share
