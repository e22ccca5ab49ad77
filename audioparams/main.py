"""Command line entry point: inspect audio stream files."""

import argparse
import logging
import sys
from fractions import Fraction
from pathlib import Path
from typing import List, Optional, Sequence

import structlog

from audioparams import __version__
from audioparams.config import config
from audioparams.core.audio_params import AudioParams
from audioparams.core.stream_config import load_streams


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """Configure structured logging.

    Arguments override the environment configuration.
    """
    level_name = (log_level or config.system.log_level).upper()
    level = getattr(logging, level_name, logging.INFO)
    log_format = log_format or config.system.log_format
    log_file = log_file or config.system.log_file

    # Logs go to stderr, reports to stdout
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=handlers,
        force=True
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _parse_time(text: str) -> Fraction:
    """Seconds as an exact fraction ("1.5", "1/3", "2")."""
    try:
        return Fraction(text)
    except (ValueError, ZeroDivisionError):
        raise argparse.ArgumentTypeError(f"invalid time: {text!r}")


def describe_stream(
    params: AudioParams,
    time: Optional[Fraction] = None,
    samples: Optional[int] = None,
    nb_bytes: Optional[int] = None,
) -> List[str]:
    """Human readable report lines for one stream."""
    status = "valid" if params.is_valid() else "invalid"
    if params.is_valid():
        status += ", supported" if params.is_supported() else ", unsupported"

    lines = [
        f"stream {params.stream_index}: {params.sample_rate} Hz, "
        f"{params.channel_layout.name} ({params.channel_count} ch), "
        f"{params.format.value}, {status}"
        + ("" if params.enabled else ", disabled"),
        f"  time base: {params.time_base}",
        f"  frame size: {params.bytes_per_frame} bytes "
        f"({params.bits_per_sample} bits per sample)",
        f"  duration: {params.duration} samples ({params.duration_time} s)",
    ]

    if time is not None:
        lines.append(
            f"  {time} s -> {params.time_to_samples(time)} samples, "
            f"{params.time_to_bytes(time)} bytes, "
            f"{params.time_to_bytes_per_channel(time)} bytes per channel"
        )
    if samples is not None:
        lines.append(
            f"  {samples} samples -> {params.samples_to_time(samples)} s, "
            f"{params.samples_to_bytes(samples)} bytes"
        )
    if nb_bytes is not None:
        lines.append(
            f"  {nb_bytes} bytes -> {params.bytes_to_samples(nb_bytes)} samples, "
            f"{params.bytes_to_time(nb_bytes)} s"
        )
    return lines


def run(args: argparse.Namespace) -> int:
    """Load the stream file and print a report.

    Returns:
        Process exit status
    """
    logger = structlog.get_logger(__name__)

    try:
        streams = load_streams(args.streams)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Failed to load streams", file_path=str(args.streams), error=str(e))
        return 1

    for params in streams:
        if not params.is_valid():
            logger.warning(
                "Invalid stream",
                stream_index=params.stream_index,
                sample_rate=params.sample_rate,
                channels=params.channel_count,
                format=params.format.value
            )
        elif not params.is_supported():
            logger.info(
                "Stream outside supported formats",
                stream_index=params.stream_index,
                sample_rate=params.sample_rate,
                channel_layout=params.channel_layout.name
            )

        for line in describe_stream(params, args.time, args.samples, args.bytes):
            print(line)

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="audioparams",
        description="Describe audio streams and convert between time, samples and bytes"
    )
    parser.add_argument("streams", type=Path, help="YAML stream file")
    parser.add_argument("--time", type=_parse_time, help="Time in seconds to convert")
    parser.add_argument("--samples", type=int, help="Sample count to convert")
    parser.add_argument("--bytes", type=int, help="Byte count to convert")
    parser.add_argument("--log-level", help="Override AUDIOPARAMS_LOG_LEVEL")
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def cli(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(log_level=args.log_level)

    try:
        status = run(args)
    except Exception as e:
        structlog.get_logger(__name__).error("Fatal error", error=str(e), exc_info=True)
        sys.exit(1)
    sys.exit(status)


if __name__ == "__main__":
    cli()
