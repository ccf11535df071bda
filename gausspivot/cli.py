"""
Command line interface.

    gausspivot -s 512
    python -m gausspivot -s 2048 --atol 0
"""

import argparse
import logging
import sys

from gausspivot.core.config import RunConfig, DEFAULT_SIZE, DEFAULT_ATOL
from gausspivot.core.result import Status
from gausspivot.pipeline import run

EXIT_SINGULAR = 255  # exit(-1) of the classic benchmark
EXIT_MISMATCH = 70   # internal software error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gausspivot",
        description="Gaussian elimination with partial pivoting benchmark",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
The system A[i][j] = 2*(min(i,j)+1), b[i] = i has the known solution
x = [-0.5, 0, ..., 0, 0.5], which is checked after every run.
Size and Time are printed before the outcome line, also when the
matrix turns out to be singular.

Exit status:
  0     correct solution found
  255   the matrix is singular
  70    solution failed verification
  2     bad command line
        """,
    )
    parser.add_argument('-s', '--size', type=int, default=DEFAULT_SIZE,
                        help=f'Matrix dimension (default: {DEFAULT_SIZE})')
    parser.add_argument('--atol', type=float, default=DEFAULT_ATOL,
                        help=f'Verification tolerance, 0 for exact (default: {DEFAULT_ATOL})')
    parser.add_argument('--no-verify', action='store_true',
                        help='Skip the closed-form solution check')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log pivoting and timing details')
    return parser


def main(argv=None) -> int:
    """CLI entry point; returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(levelname)s %(name)s: %(message)s")

    size = args.size
    if size <= 0:
        size = DEFAULT_SIZE
        print(f"  -s is negative... using {size}")

    try:
        config = RunConfig(size=size, atol=args.atol, verify=not args.no_verify)
    except ValueError as exc:
        parser.error(str(exc))
    report = run(config)

    print(f"Size: {report.size} rows")
    print(f"Time: {report.elapsed:f} seconds")

    if report.status is Status.SINGULAR:
        print("The matrix is singular")
        return EXIT_SINGULAR
    if report.status is Status.MISMATCH:
        print(f"ERROR: {report.message}", file=sys.stderr)
        return EXIT_MISMATCH

    print(report.message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
