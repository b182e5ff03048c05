#!/usr/bin/env python3
"""Deal threshold BLS key shares to participant key files."""

import argparse
from pathlib import Path

from threshold_bls.config import DealerConfig, KeyFormat, load_dealer_config
from threshold_bls.dealer import deal, write_key_files
from threshold_bls.utils import configure_logging, get_logger

logger = get_logger("threshold_bls.scripts.deal_keys")


def build_config(args: argparse.Namespace) -> DealerConfig:
    if args.threshold is None and args.participants is None:
        return load_dealer_config(args.config)
    if args.threshold is None or args.participants is None:
        raise SystemExit("--threshold and --participants must be given together")
    return DealerConfig.from_dict(
        {
            "threshold": args.threshold,
            "participants": args.participants,
            "first_index": args.first_index,
            "output_dir": str(args.output_dir),
            "key_format": args.key_format,
        }
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Deal threshold BLS key shares")
    parser.add_argument("--config", type=Path, default=None, help="Dealer config JSON (default: $THRESHOLD_BLS_CONFIG or config/dealer-config.json)")
    parser.add_argument("--threshold", type=int, default=None, help="Threshold t: any t+1 shares can sign/decrypt")
    parser.add_argument("--participants", type=int, default=None, help="Number of shares n to issue")
    parser.add_argument("--first-index", type=int, default=1, help="Index of the first participant (default: 1)")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("keys"),
        help="Output directory for key files (default: keys)",
    )
    parser.add_argument(
        "--key-format",
        choices=[f.value for f in KeyFormat],
        default=KeyFormat.HEX.value,
        help="Encoding of key material in the JSON files (default: hex)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: $LOG_LEVEL or INFO)")
    args = parser.parse_args()

    configure_logging(args.log_level)
    config = build_config(args)
    dealt = deal(config)
    try:
        written = write_key_files(dealt, config)
    finally:
        dealt.zeroize()

    print(f"Master public key: {dealt.public_keys.public_key().to_bytes().hex()}")
    for name, path in written.items():
        print(f"  {name}: {path}")


if __name__ == "__main__":
    main()
