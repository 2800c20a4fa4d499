import argparse
import json
import logging
import sys
from pathlib import Path

from pypssig import Params, SeededRandom, generator, load_library
from pypssig.definitions import SCHEMES

_logger = logging.getLogger("pypssig")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pypssig", description="Generate Pointcheval-Sanders keys"
    )
    parser.add_argument("--scheme", choices=sorted(SCHEMES), default="ps16")
    parser.add_argument("--label", default="", help="params label")
    parser.add_argument(
        "--messages", type=int, required=True, help="message slot count"
    )
    parser.add_argument(
        "--seed",
        help="hex seed for a reproducible (insecure) key, testing only",
    )
    parser.add_argument(
        "--output", type=Path, help="write *.b64 files into this directory"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        format="%(levelname)s|%(name)s: %(message)s",
        level=logging.DEBUG if args.verbose else logging.ERROR,
    )
    if args.messages < 0:
        _logger.error("--messages must be >= 0, got %d", args.messages)
        return 1
    rng = None
    if args.seed is not None:
        try:
            rng = SeededRandom(bytes.fromhex(args.seed))
        except ValueError:
            _logger.error("--seed must be hex, got %s", args.seed)
            return 1
    try:
        load_library()
    except RuntimeError as e:
        _logger.error("%s", e)
        return 1

    params = Params.new(args.label)
    sk, pk = generator(args.scheme)(args.messages, params, rng)
    out = {
        "params": params.to_b64(),
        "secret": sk.to_b64(),
        "public": pk.to_b64(),
    }
    if args.output is None:
        print(json.dumps(out, indent=2))
    else:
        args.output.mkdir(parents=True, exist_ok=True)
        for name, data in out.items():
            (args.output / f"{name}.b64").write_text(data)
        _logger.info("Keys written to %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
