#!/usr/bin/env python3
"""
Basic Usage Example - Conventor Bidding System Compiler

This script demonstrates the basic usage of the compiler with the sample
system shipped next to it. It shows how to:
- Initialize the compiler
- Compile a YAML convention file
- Look up nodes by auction
- Check auction legality and enumerate legal next calls
- Export node views as JSON

Run: python examples/basic_usage.py
"""

import json
from pathlib import Path

from conventor.bidding.auction import is_legal_auction, legal_next_calls
from conventor.bidding.models import DOUBLE, PASS, Call, Strain
from conventor.compiler import ConventionCompiler
from conventor.render import node_view

SAMPLE_SYSTEM = Path(__file__).parent / "sample_system.yaml"


def print_tree(compiler: ConventionCompiler, tree) -> None:
    """Print every compiled auction with its description."""
    print("\n📚 Compiled system:")
    for view in compiler.views(tree):
        flags = "!!" if view.is_announceable else "!" if view.is_alertable else ""
        tag = f" [{view.alert_tag}]" if view.alert_tag else ""
        print(f"  {view.sequence}{flags}{tag}: {view.description or ''}")


def demonstrate_lookup(compiler: ConventionCompiler, tree) -> None:
    """Look up a few auctions by path."""
    print("\n🔎 Lookups:")
    for sequence in ("1H", "1C-P-1S", "1NT/2C/2H", "1NT/2S"):
        node = compiler.get_node(tree, sequence)
        if node is None:
            print(f"  {sequence}: not in system")
        else:
            print(f"  {sequence}: {node.resolved_description}")


def demonstrate_legality() -> None:
    """Validate auctions and enumerate continuations."""
    print("\n⚖️  Auction legality:")
    one_club = Call(1, Strain.CLUBS)

    for auction in ([one_club, PASS, PASS], [one_club, DOUBLE], [one_club, PASS, DOUBLE]):
        text = "-".join(str(call) for call in auction)
        print(f"  {text}: {'legal' if is_legal_auction(auction) else 'illegal'}")

    next_calls = legal_next_calls([one_club])
    print(f"  after 1C: {len(next_calls)} legal calls, first {[str(c) for c in next_calls[:5]]}")


def main():
    """Run the basic usage demonstration."""
    print("🃏 Conventor basic usage")

    compiler = ConventionCompiler()
    tree = compiler.compile_file(SAMPLE_SYSTEM)

    print_tree(compiler, tree)
    demonstrate_lookup(compiler, tree)
    demonstrate_legality()

    node = compiler.get_node(tree, "1NT/2C!")
    if node is not None:
        print("\n📦 JSON export of 1NT-P-2C:")
        print(json.dumps(node_view(node, compiler.config.render).to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
