"""
small command line tour of qstream pipelines over generated order records.
"""

import argparse
import logging
from dgen import from_schema
from qstream import configure, from_range, iterate, concat, of

# configure minimal logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(message)s')
logger = logging.getLogger(__name__)

order_schema = {
    'order_id': {'_qen_provider': 'sequence'},
    'customer': 'name',
    'country': {'_qen_provider': 'choice', 'from': ['de', 'fr', 'nl', 'us']},
    'total': ('pyfloat', {'min_value': 5.0, 'max_value': 900.0, 'right_digits': 2}),
}


def by_total(a, b):
    return (a['total'] > b['total']) - (a['total'] < b['total'])


def top_orders(records: int, seed: int, top: int):
    """sort a bounded slice of the infinite order stream and keep the biggest ones"""
    pulled = []
    orders = from_schema(order_schema, seed=seed).stream() \
        .peek(lambda o: pulled.append(o['order_id'])) \
        .limit(records) \
        .sorted(lambda a, b: by_total(b, a)) \
        .limit(top)
    result = orders.to.df()
    logger.info(f"pulled {len(pulled)} records from the source to rank the top {top}")
    return result


def first_big_spender(seed: int, threshold: float):
    """short-circuits as soon as an order crosses the threshold"""
    pulled = []
    hit = from_schema(order_schema, seed=seed).stream() \
        .peek(lambda o: pulled.append(o['order_id'])) \
        .filter(lambda o: o['total'] >= threshold) \
        .to.first_or_default()
    logger.info(f"found an order >= {threshold} after {len(pulled)} pulls")
    return hit


def countries(records: int, seed: int):
    return from_schema(order_schema, seed=seed).take(records) \
        .map(lambda o: o['country']) \
        .distinct() \
        .sorted(lambda a, b: (a > b) - (a < b)) \
        .to.list()


def number_tricks():
    collatz = iterate(27, lambda n: n // 2 if n % 2 == 0 else 3 * n + 1).limit_while(lambda n: n != 1)
    squares = from_range(1).map(lambda n: n * n).limit_while(lambda n: n < 50)
    return {
        'collatz_steps_from_27': collatz.to.count(),
        'longest_collatz_peak': collatz.to.max_or_default(lambda a, b: a - b),
        'small_squares': squares.to.list(),
        'joined': concat(of("a", "b"), of("c")).to.reduce("prefix", lambda acc, v: acc + "-" + v),
    }


def create_cli_interface() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='qstream pipeline demo')
    parser.add_argument('--records', type=int, default=200, help='Records to rank (default: 200)')
    parser.add_argument('--top', type=int, default=5, help='How many top orders to show (default: 5)')
    parser.add_argument('--threshold', type=float, default=850.0, help='Big spender threshold (default: 850)')
    parser.add_argument('--seed', type=int, default=42, help='Seed for generated data (default: 42)')
    parser.add_argument('--strict', action='store_true', help='Fail when a one-shot source is re-enumerated')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    return parser


def main():
    """main entry point for the demo"""
    args = create_cli_interface().parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    configure(strict_sources=args.strict)

    print("\n=== top orders ===")
    print(top_orders(args.records, args.seed, args.top).to_string(index=False))

    print("\n=== first big spender ===")
    print(first_big_spender(args.seed, args.threshold))

    print("\n=== countries seen ===")
    print(countries(args.records, args.seed))

    print("\n=== number tricks ===")
    for key, value in number_tricks().items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
