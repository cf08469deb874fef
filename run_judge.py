#!/usr/bin/env python3
# run_judge.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# Command-line interface for judging reference stack subjects against scenario scripts

import sys
import argparse
from pathlib import Path
from typing import Optional

from core import ArbiterError, Done, Outcome, judge, judge_strict
from core.exceptions import ArbiterDefect, ArbiterFailure, SubjectFault
from parser import load_scenario, ParseError
from scenarios.stack import StackArbiter
from scenarios.subjects import STACK_SUBJECTS
from utils.logger import LogLevel, get_logger
from utils.transcript import RecordingSubject, Transcript

EXIT_DONE = 0
EXIT_SUBJECT_FAULT = 1
EXIT_PARSE_ERROR = 2
EXIT_FILE_ERROR = 3
EXIT_ARBITER_FAILURE = 4
EXIT_ARBITER_DEFECT = 5
EXIT_INTERRUPTED = 6


def configure_logging_for_judge(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging levels for a judgment run.

    The final verdict is logged at INFO, so INFO stays on without flags;
    verbose output is handled by run_session.

    Args:
        verbose: Accepted for symmetry with --verbose
        debug: Enable DEBUG level logging (overrides verbose)
    """
    logger = get_logger()

    if debug:
        logger.set_level(LogLevel.DEBUG)
    else:
        logger.set_level(LogLevel.INFO)


def exit_code_for(outcome: Outcome) -> int:
    """Map a completed run to the process exit code."""
    if outcome.is_done:
        return EXIT_DONE
    if outcome.is_halt:
        return EXIT_SUBJECT_FAULT
    return EXIT_ARBITER_DEFECT


def write_transcript(transcript: Transcript, transcript_path: Path) -> bool:
    """Write the transcript CSV without affecting the run's exit code.

    Returns:
        True if the file was written, False otherwise
    """
    logger = get_logger()
    try:
        transcript.write_csv(transcript_path)
    except OSError as e:
        logger.warning(f"[WARN] Could not write transcript to {transcript_path}: {e}")
        return False
    logger.info(f"📝 Transcript written to {transcript_path}")
    return True


def run_session(
    scenario_path: Path,
    subject_name: str,
    strict: bool = False,
    max_calls: Optional[int] = None,
    transcript_path: Optional[Path] = None,
    render_name: Optional[str] = None,
    verbose: bool = False,
) -> int:
    """Judge one reference subject against a scenario script.

    Returns:
        Exit code (see EXIT_* constants)
    """
    logger = get_logger()

    arbiter = StackArbiter(load_scenario(scenario_path))
    transcript = Transcript()
    subject = RecordingSubject(STACK_SUBJECTS[subject_name](), transcript)

    outcome: Optional[Outcome] = None
    try:
        if strict:
            calls = judge_strict(arbiter, subject, max_calls=max_calls)
            outcome = Outcome(Done(), calls)
            logger.final_verdict(outcome.verdict, calls)
            code = EXIT_DONE
        else:
            outcome = judge(arbiter, subject, max_calls=max_calls)
            logger.final_verdict(outcome.verdict, outcome.calls)
            code = exit_code_for(outcome)
    except SubjectFault as e:
        outcome = e.outcome
        logger.error(str(e))
        code = EXIT_SUBJECT_FAULT
    except ArbiterDefect as e:
        outcome = e.outcome
        logger.error(str(e))
        code = EXIT_ARBITER_DEFECT
    finally:
        if transcript_path is not None:
            write_transcript(transcript, transcript_path)

    if verbose:
        for entry in transcript:
            logger.info(f"  {entry}")

    if render_name:
        from graphviz import CalledProcessError, ExecutableNotFound
        from utils.transcript_visualizer import render_transcript

        try:
            render_transcript(transcript, render_name, outcome)
        except (ExecutableNotFound, CalledProcessError) as e:
            logger.warning(f"[WARN] Error during transcript visualization: {e}")

    return code


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Tribunal cause-effect conformance harness",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_judge.py -s scenario.txt
  python run_judge.py -s scenario.txt --subject lazy -v
  python run_judge.py -s scenario.txt --subject zero_smart --strict
  python run_judge.py -s scenario.txt --transcript run.csv --render run
  python run_judge.py -s scenario.txt --validate-only

Scenario file format:
  scenario.txt:
    push 1, push 2, push 3
    pop; pop
    Push(4) Pop
        """,
    )

    parser.add_argument(
        "-s", "--scenario", required=True, type=Path, help="Path to stack scenario script"
    )

    parser.add_argument(
        "--subject",
        choices=sorted(STACK_SUBJECTS),
        default="mirror_stack",
        help="Reference subject to judge (default: mirror_stack)",
    )

    parser.add_argument(
        "--strict", action="store_true", help="Fail hard on anything but Done"
    )

    parser.add_argument(
        "--max-calls", type=int, default=None, help="Stop after this many subject calls"
    )

    parser.add_argument(
        "--transcript", type=Path, default=None, help="Write the turn transcript as CSV"
    )

    parser.add_argument(
        "--render", default=None, help="Render the transcript with Graphviz under this name"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--validate-only", action="store_true", help="Only parse the scenario script"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the judgment runner.

    Returns:
        Exit code (0 for Done, non-zero otherwise)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging_for_judge(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.validate_only:
            steps = load_scenario(args.scenario)
            logger.info(f"✅ Scenario is well-formed ({len(steps)} steps)")
            return EXIT_DONE

        return run_session(
            args.scenario,
            args.subject,
            strict=args.strict,
            max_calls=args.max_calls,
            transcript_path=args.transcript,
            render_name=args.render,
            verbose=args.verbose,
        )

    except ParseError as e:
        logger.error(f"Scenario parsing error: {e}")
        return EXIT_PARSE_ERROR

    except OSError as e:
        logger.error(f"Scenario file error: {e}")
        return EXIT_FILE_ERROR

    except ArbiterFailure as e:
        logger.error(str(e))
        return EXIT_ARBITER_FAILURE

    except ArbiterError as e:
        logger.error(f"Arbiter internal error: {e}")
        return EXIT_ARBITER_FAILURE

    except KeyboardInterrupt:
        logger.error("Judgment interrupted by user")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
