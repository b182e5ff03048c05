#!/usr/bin/env python3
"""Time dealing, signing, combining and threshold decryption for one (t, n) setting."""

import argparse
import random

from threshold_bls import SecretKeySet
from threshold_bls.utils import InMemoryMetrics, Timer, configure_logging


def run(threshold: int, participants: int, rounds: int, seed: int) -> InMemoryMetrics:
    rng = random.Random(seed)
    sink = InMemoryMetrics()
    message = b"benchmark message"
    for _ in range(rounds):
        with Timer(sink, "deal", t=str(threshold)):
            sk_set = SecretKeySet.random(threshold, rng)
            pk_set = sk_set.public_keys()
            shares = [sk_set.secret_key_share(i) for i in range(1, participants + 1)]
        quorum = shares[: threshold + 1]

        with Timer(sink, "sign_share"):
            sig_shares = [s.sign(message) for s in quorum]
        with Timer(sink, "verify_share"):
            for share in sig_shares:
                pk_set.public_key_share(share.index).verify(share, message)
        with Timer(sink, "combine_signatures"):
            signature = pk_set.combine_signatures(sig_shares)
        with Timer(sink, "verify"):
            ok = pk_set.public_key().verify(signature, message)
        sink.emit_counter("verified" if ok else "rejected")

        ciphertext = pk_set.public_key().encrypt(message, rng)
        with Timer(sink, "decrypt_share"):
            dec_shares = [s.decrypt_share(ciphertext) for s in quorum]
        with Timer(sink, "combine_decryption"):
            pk_set.decrypt(dec_shares, ciphertext)
    return sink


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark threshold BLS operations")
    parser.add_argument("--threshold", type=int, default=2)
    parser.add_argument("--participants", type=int, default=5)
    parser.add_argument("--rounds", type=int, default=3)
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args()
    if args.participants <= args.threshold:
        parser.error("--participants must exceed --threshold")

    configure_logging("WARNING")
    sink = run(args.threshold, args.participants, args.rounds, args.seed)
    print(f"t={args.threshold} n={args.participants} rounds={args.rounds}")
    for name in sink.timers:
        summary = sink.timer_summary(name)
        print(f"  {name:<20} mean={summary['mean'] * 1000:9.1f} ms  min={summary['min'] * 1000:9.1f} ms  max={summary['max'] * 1000:9.1f} ms")


if __name__ == "__main__":
    main()
