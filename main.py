import argparse
import os
from pathlib import Path

import uvicorn


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Quiz task runner server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument(
        "--source",
        default=None,
        help="Task workbook path or http(s) URL (default: data/Question.xlsx)",
    )
    parser.add_argument("--images-dir", type=Path, default=None)
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    # api.config reads the environment on import
    if args.source:
        os.environ["TASKS_SOURCE"] = args.source
    if args.images_dir:
        os.environ["IMAGES_DIR"] = str(args.images_dir)

    from api.app import app

    uvicorn.run(app, host=args.host, port=args.port, log_level="info")


if __name__ == "__main__":
    main()
