# benchmark/distribution_report.py

import argparse
import logging
import random
import time

from rendezvous.utils.config import LOG_LEVEL
from rendezvous.utils.metrics import get_metrics, reset_metrics
from rendezvous.utils.rendezvous_hash import RendezvousHash

# Contoh: python -m benchmark.distribution_report --nodes 20 --keys 100000


def positive_int(value):
    """Tipe argparse untuk bilangan bulat >= 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def measure_balance(selector, keys):
    """Menghitung berapa key yang didapat setiap node."""
    counts = {node: 0 for node in selector.nodes}
    for node in selector.assignments(keys).values():
        counts[node] += 1
    return counts


def measure_disruption(selector, keys, node):
    """Menghapus satu node lalu menghitung key yang berpindah (lalu node dikembalikan)."""
    before = selector.assignments(keys)
    selector.remove(node)
    after = selector.assignments(keys)
    selector.add(node)

    # Pool yang tadinya hanya berisi node ini menjadi kosong: semua key kehilangan pemilik
    moved = sum(1 for key in keys if before[key] != after.get(key))
    owned = sum(1 for owner in before.values() if owner == node)
    return moved, owned


def main(argv=None):
    parser = argparse.ArgumentParser(description="Rendezvous hashing load-balance report")
    parser.add_argument("--nodes", type=positive_int, default=10)
    parser.add_argument("--keys", type=positive_int, default=100_000)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
    reset_metrics()

    rng = random.Random(args.seed)
    selector = RendezvousHash(nodes=[f"node{i}" for i in range(args.nodes)], name="benchmark")
    keys = [f"key:{rng.getrandbits(64)}" for _ in range(args.keys)]

    start_time = time.time()
    counts = measure_balance(selector, keys)
    elapsed = time.time() - start_time

    expected = args.keys / args.nodes
    worst = max(abs(count - expected) / expected for count in counts.values())
    logging.info(f"Assigned {args.keys} keys to {args.nodes} nodes in {elapsed:.2f}s")
    for node in sorted(counts):
        logging.info(f"  {node}: {counts[node]} keys ({counts[node] / args.keys:.2%})")
    logging.info(f"Worst relative deviation from 1/n: {worst:.2%}")

    victim = rng.choice(sorted(selector.nodes))
    moved, owned = measure_disruption(selector, keys, victim)
    logging.info(f"Removing {victim} moved {moved} keys; it owned {owned}")

    logging.info(f"Metrics: {get_metrics()}")


if __name__ == "__main__":
    main()
