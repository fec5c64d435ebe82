"""Result-file output."""

from pathlib import Path

from cli.schemas import SimulationReport


def append_report(path: str | Path, report: SimulationReport) -> int:
    """
    Append a finished report to a results file.

    Called once, after every trial completed. The file is opened in append
    mode and line-buffered.

    Returns:
        The number of lines written
    """
    lines = report.file_lines()
    with open(path, "a", buffering=1, encoding="utf-8") as handle:
        for line in lines:
            handle.write(f"{line}\n")
    return len(lines)
