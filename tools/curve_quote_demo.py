#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pumpcurve.core import AMM, load_network_config, with_slippage_buy, with_slippage_sell


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Quote a buy then a sell on a fresh bonding curve.")
    p.add_argument("--tokens", type=int, default=1_000_000_000, help="token amount in base units")
    p.add_argument("--slippage-bps", type=int, default=None, help="slippage tolerance in basis points")
    p.add_argument("--config", type=Path, default=None, help="network config YAML")
    p.add_argument("--log-level", default="WARNING")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    net = load_network_config(args.config)
    slippage_bps = net.default_slippage_bps if args.slippage_bps is None else args.slippage_bps
    amm = AMM.from_global_config(net.global_config)

    quote = amm.get_buy_price(min(args.tokens, amm.real_token_reserves))
    bought = amm.apply_buy(args.tokens)
    print(f"[curve-demo] buy  tokens={bought.token_amount} sol={bought.sol_amount} quote={quote}")
    print(f"[curve-demo] max_sol_cost={with_slippage_buy(bought.sol_amount, slippage_bps)} (slippage_bps={slippage_bps})")

    sold = amm.apply_sell(bought.token_amount)
    print(f"[curve-demo] sell tokens={sold.token_amount} sol={sold.sol_amount}")
    print(f"[curve-demo] min_sol_output={with_slippage_sell(sold.sol_amount, slippage_bps)}")
    print(f"[curve-demo] spread={bought.sol_amount - sold.sol_amount}")
    print(f"[curve-demo] reserves: {amm!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
