"""
solver/solver_cli.py

Command-line front end for the Wordle bot.

- By default: print the best next guess for the clues given with --clues.
- --rank K: also print the K most and K least informative guesses.
- --histogram: play every answer (or the first --limit) and print how many
  guesses each took.
- --interactive: human-in-the-loop; the bot suggests, you type the feedback.

Clues are comma-separated word:codes tokens, codes 1=absent, 2=present,
3=exact (b/y/g also accepted), e.g. --clues crane:11213,doubt:11133

Run:
  python -m solver.solver_cli guesses.txt answers.txt --clues crane:11213
  python -m solver.solver_cli --csv word_list.csv --histogram --limit 200
  python -m solver.solver_cli --csv word_list.csv --interactive

Shortcuts (interactive):
  quit / q / exit  -> exit
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from wordlebot.bot import Bot
from wordlebot.data_utils import load_csv_vocabularies, load_vocabularies
from wordlebot.errors import ClueParseError, NoPlausibleAnswerError
from wordlebot.feedback import Clue, format_clues, is_solved, parse_clue, parse_clues, parse_score
from wordlebot.selfplay import histogram, histogram_frame, mean_guesses

log = logging.getLogger(__name__)

QUIT = {"q", "quit", "exit"}


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Information-maximising Wordle solver")
    ap.add_argument("guesses", nargs="?", help="Guess word list, one word per line")
    ap.add_argument("answers", nargs="?", help="Answer word list, one word per line")
    ap.add_argument("--csv", default=None, help="word_list.csv with 'word' and 'day' columns (instead of the two lists)")
    ap.add_argument("--adversarial", action="store_true", help="Rank by worst-case surprise instead of expected entropy")
    ap.add_argument("--clues", default="", help="Clue history, e.g. crane:11213,doubt:11133")
    ap.add_argument("--rank", type=int, default=0, metavar="K", help="Print the K best and K worst guesses")
    ap.add_argument("--histogram", action="store_true", help="Self-play every answer and print the guess histogram")
    ap.add_argument("--limit", type=int, default=None, help="Self-play only the first N answers")
    ap.add_argument("--out", default=None, help="Write the histogram to this CSV path")
    ap.add_argument("--interactive", action="store_true", help="Suggest guesses and read feedback from stdin")
    ap.add_argument("--workers", type=int, default=None, help="Evaluation processes (default: CPU count)")
    ap.add_argument("-v", "--verbose", action="store_true")
    ap.add_argument("--debug", action="store_true")
    return ap


def _print_rank(bot: Bot, clues: List[Clue], k: int) -> None:
    ranked = bot.rank(clues)
    for e in ranked[:k]:
        print(f"{e.guess}: {e.bits:.6f}")
    if len(ranked) > k:
        print("...")
        for e in ranked[-k:]:
            print(f"{e.guess}: {e.bits:.6f}")


def _run_histogram(bot: Bot, limit: int | None, out: str | None) -> None:
    answers = bot.answers.words()
    if limit is not None:
        answers = answers[:limit]
    hist = histogram(bot, answers)
    df = histogram_frame(hist)
    print(df.to_string(index=False))
    if hist:
        print(f"mean {mean_guesses(hist):.4f}, max {max(hist)} guesses over {len(answers)} answers")
    else:
        print("no answers played")
    print(f"cache hits {bot.cache_hits}, misses {bot.cache_misses}")
    if out:
        df.to_csv(out, index=False)
        print(f"Wrote histogram to {out}")


def _interactive(bot: Bot, clues: List[Clue]) -> None:
    print("\nWordle helper: after each guess, type the feedback you saw.")
    print("Codes 1/2/3 (or b/y/g), or word:codes if you played a different word. 'quit' to exit.\n")
    while True:
        suggestion = bot.choice(clues)
        remaining = bot.plausible_answers(clues)
        print(f"Remaining candidates: {len(remaining)}")
        if len(remaining) <= 10:
            print("Candidates:", ", ".join(remaining))
        print(f"Suggested guess: {suggestion}")

        while True:
            fb = input("Feedback: ").strip().lower()
            if fb in QUIT:
                print("bye!")
                return
            try:
                if ":" in fb:
                    clue = parse_clue(fb, bot.word_length)
                else:
                    clue = (suggestion, parse_score(fb, bot.word_length))
                break
            except ClueParseError as e:
                print("Invalid feedback:", e)

        clues.append(clue)
        if is_solved(clue[1]):
            print(f"Solved in {len(clues)}: {format_clues(clues)}")
            return


def main(argv: List[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(format="%(relativeCreated)8d ms  // %(name)s: %(message)s")
    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.csv:
        guesses, answers = load_csv_vocabularies(args.csv)
    elif args.guesses and args.answers:
        guesses, answers = load_vocabularies(args.guesses, args.answers)
    else:
        print("need either --csv or both guess and answer word lists", file=sys.stderr)
        return 2
    log.info("loaded %d guesses, %d answers", len(guesses), len(answers))

    bot = Bot(guesses, answers, adversarial=args.adversarial, max_workers=args.workers)

    try:
        clues = parse_clues(args.clues, bot.word_length)
        if args.histogram:
            _run_histogram(bot, args.limit, args.out)
        elif args.interactive:
            _interactive(bot, clues)
        else:
            if args.rank:
                _print_rank(bot, clues, args.rank)
            print(bot.choice(clues))
    except (ClueParseError, NoPlausibleAnswerError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
