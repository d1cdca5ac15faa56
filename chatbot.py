# chatbot.py

"""
Noun inference console
Teach and query categorical statements interactively.

Usage:
    python chatbot.py
    python chatbot.py "All dogs are mammals" "All mammals are animals" "Are all dogs animals?"
    python chatbot.py --plot kb.png "No dogs are cats"
"""

import argparse
import logging
import sys
from typing import List, Optional

from logic_validator import StatementValidator

logger = logging.getLogger(__name__)

EXIT_WORDS = {'exit', 'quit', 'bye'}

HELP = """Statements:
  All <A> are <B>        No <A> are <B>
  Are all <A> <B>?       Are no <A> <B>?
Commands: nouns, edges, stats, help, exit"""


def format_result(result: dict) -> str:
    if result['method'] == 'teach':
        return f"👍 {result['proof']}"
    if result['method'] == 'non-logical':
        return f"🤷 {result['proof']}"

    answer = result['answer']
    verdict = 'Yes' if answer is True else 'No' if answer is False else 'Unknown'
    return f"🔬 {verdict} — {result['proof']}"


def handle(validator: StatementValidator, line: str) -> Optional[str]:
    """Process one input line. Returns the text to print, or None to quit."""
    command = line.strip().lower()

    if command in EXIT_WORDS:
        return None
    if command == 'help':
        return HELP
    if command == 'nouns':
        return ", ".join(validator.engine.nouns()) or "(no nouns yet)"
    if command == 'edges':
        frame = validator.engine.graph.to_frame()
        return frame.to_string(index=False) if len(frame) else "(no edges yet)"
    if command == 'stats':
        stats = validator.graph_stats()
        return "\n".join(f"  {k:18}: {v}" for k, v in stats.items())

    return format_result(validator.validate(line))


def start_chat(validator: StatementValidator) -> None:
    print("=========================================================")
    print("🧠 Noun Inference Console (Type 'help' or 'exit')")
    print("=========================================================")

    while True:
        try:
            line = input("\n🧑 You: ")
        except EOFError:
            break
        if not line.strip():
            continue

        output = handle(validator, line)
        if output is None:
            break
        print(output)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Teach and query noun relationships')
    parser.add_argument('statements', nargs='*',
                        help='Statements to process in order; omit for interactive mode')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging verbosity')
    parser.add_argument('--plot', type=str, default=None,
                        help='Write a PNG of the knowledge graph to this path')
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    validator = StatementValidator()

    if args.statements:
        logger.debug(f"[console] Processing {len(args.statements)} statement(s)")
        for statement in args.statements:
            output = handle(validator, statement)
            if output is None:
                break
            print(f"{statement}\n  {output}")
    else:
        start_chat(validator)

    if args.plot:
        from visualize import plot_knowledge_graph
        plot_knowledge_graph(validator.engine.graph, args.plot)
        print(f"✅ Graph saved as '{args.plot}'")

    return 0


if __name__ == "__main__":
    sys.exit(main())
