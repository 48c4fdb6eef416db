import argparse
import sys
from pathlib import Path

from api.utils import json_dump
from logging_setup import setup_console_logging
from results import export_results
from serialization import serialize_task
from session import TaskSession
from task_source import TaskSourceError, load_tasks

setup_console_logging()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect quiz task workbooks")
    sub = parser.add_subparsers(dest="command", required=True)

    inspect_cmd = sub.add_parser("inspect", help="Print parsed tasks as JSON")
    inspect_cmd.add_argument("source", help="Path or http(s) URL of the workbook")

    key_cmd = sub.add_parser(
        "answer-key",
        help="Write the results workbook of a respondent who answers every task correctly",
    )
    key_cmd.add_argument("source", help="Path or http(s) URL of the workbook")
    key_cmd.add_argument(
        "--output",
        type=Path,
        default=Path("Result.xlsx"),
        help="Where to write the results workbook",
    )
    return parser.parse_args(argv)


def answer_key_session(source: str) -> TaskSession:
    """A session where every task has its correct answer picked, zero time spent."""
    session = TaskSession(clock=lambda: 0)
    session.load_tasks(load_tasks(source))
    for task in session.tasks:
        for question_index, question in enumerate(task.questions):
            # tasks without a marked answer get the first option
            position = question.correct_position() or 1
            session.toggle_answer(
                task.id, question_index, position - 1, question.type_question
            )
    return session


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        if args.command == "inspect":
            tasks = load_tasks(args.source)
            print(json_dump([serialize_task(task) for task in tasks]))
            return 0

        content = export_results(answer_key_session(args.source))
    except TaskSourceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if content is None:
        print("Error: workbook has no tasks", file=sys.stderr)
        return 1
    args.output.write_bytes(content)
    print(f"Saved results to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
