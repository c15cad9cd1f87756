"""
Workflow orchestration for a conversion run.

A run:
1. Loads the state reference table
2. Prepares the output directory and copies the CSV templates into it
3. Walks the input tree for report PDFs, in sorted order
4. Routes each PDF by file name, extracts its text and flattens its data rows
5. Appends the records to the report label's output CSV
6. Summarizes what was converted, skipped and failed

Reports are processed one at a time and every write goes through one
CsvOutputManager, so reports sharing an output file never interleave.
"""

import logging
import re
import shutil
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from tqdm import tqdm

from acf_report_csv.cleaners.state_directory import StateDirectory
from acf_report_csv.config.settings import Settings
from acf_report_csv.exceptions import (
    ConversionFailed,
    MissingInputFile,
    MissingOutputDirectory,
    ReportConversionError,
)
from acf_report_csv.processors.pdf_processor import extract_text
from acf_report_csv.processors.report_router import ReportDescriptor, ReportKind, route
from acf_report_csv.transformers.flatteners import flatten
from acf_report_csv.utils.csv_writer import CsvOutputManager

logger = logging.getLogger(__name__)

YEAR_DIR_RE = re.compile(r"\d{4}")

Extractor = Callable[[Path], str]


@dataclass
class RunSummary:
    """Outcome of a conversion run."""

    converted: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failures: List[Tuple[str, Exception]] = field(default_factory=list)
    records: Dict[str, int] = field(default_factory=dict)
    elapsed: float = 0.0

    @property
    def total_records(self) -> int:
        return sum(self.records.values())


def copy_templates(template_dir: Union[str, Path], output_dir: Union[str, Path]) -> List[str]:
    """
    Copy every template file verbatim into the output directory, overwriting.

    Args:
        template_dir: Folder holding the template files.
        output_dir: Destination folder.

    Returns:
        Names of the copied files (empty if the template folder does not exist).
    """
    template_dir, output_dir = Path(template_dir), Path(output_dir)
    if not template_dir.is_dir():
        logger.info("No template folder at %s, nothing copied", template_dir)
        return []

    copied = []
    for template in sorted(template_dir.iterdir()):
        if template.is_file():
            shutil.copyfile(template, output_dir / template.name)
            copied.append(template.name)

    logger.info("Copied %d template(s) into %s", len(copied), output_dir)
    return copied


def discover_reports(
    input_root: Union[str, Path],
    extra_roots: Iterable[Union[str, Path]] = (),
    exclude: Iterable[Union[str, Path]] = (),
) -> List[Path]:
    """
    Find every report PDF below the input root.

    Args:
        input_root: Root of the report tree (year folders, Combined folder, ...).
        extra_roots: Further trees to search, such as a nested "pdf" tree. Missing
            extra roots are ignored.
        exclude: Folders whose contents are never reports (e.g. templates).

    Returns:
        Sorted, de-duplicated list of PDF paths.

    Raises:
        MissingInputFile: If the input root does not exist.
    """
    input_root = Path(input_root)
    if not input_root.is_dir():
        raise MissingInputFile(f"Input folder not found: {input_root}")

    excluded = [Path(p).resolve() for p in exclude]
    roots = [input_root] + [Path(p) for p in extra_roots if Path(p).is_dir()]

    found = set()
    for root in roots:
        for path in root.rglob("*"):
            if not path.is_file() or path.suffix.lower() != ".pdf":
                continue
            resolved = path.resolve()
            if any(folder in resolved.parents for folder in excluded):
                continue
            found.add(resolved)

    return sorted(found)


def check_year_folder(pdf_path: Path, descriptor: ReportDescriptor) -> None:
    """Warn when a yearly report sits in a year folder that disagrees with its name."""
    folder = pdf_path.parent.name
    if descriptor.kind is ReportKind.YEARLY and YEAR_DIR_RE.fullmatch(folder):
        if int(folder) != descriptor.year:
            logger.warning(
                "%s is in folder %s but named for %d; using %d",
                pdf_path.name,
                folder,
                descriptor.year,
                descriptor.year,
            )


def is_selected(descriptor: ReportDescriptor, yearly_labels: Sequence[str]) -> bool:
    """Combined reports are always converted; yearly ones only if listed (or no list)."""
    if descriptor.kind is ReportKind.COMBINED or not yearly_labels:
        return True
    return descriptor.output_base_name in yearly_labels


def convert_report(
    pdf_path: Union[str, Path],
    directory: StateDirectory,
    sink: CsvOutputManager,
    extractor: Extractor = extract_text,
    descriptor: Optional[ReportDescriptor] = None,
) -> int:
    """
    Convert one report PDF and append its records to the output CSV.

    Args:
        pdf_path: Report PDF.
        directory: Loaded state directory.
        sink: Output writer for the run.
        extractor: Text extraction function (PyMuPDF based by default).
        descriptor: Pre-routed descriptor; routed from the file name if None.

    Returns:
        Number of records written.

    Raises:
        UnrecognizedFileName: If the file name matches no report pattern.
        RowShapeMismatch: If a data row has the wrong number of values.
    """
    pdf_path = Path(pdf_path)
    descriptor = descriptor or route(pdf_path.name)
    check_year_folder(pdf_path, descriptor)

    text = extractor(pdf_path)
    records = list(flatten(text, descriptor, directory, source=pdf_path.name))
    written = sink.write(descriptor, records)

    logger.debug("%s -> %s: %d record(s)", pdf_path.name, descriptor.output_file_name, written)
    return written


def run_conversion(
    settings: Settings,
    fail_fast: Optional[bool] = None,
    extractor: Extractor = extract_text,
    verbose: bool = True,
) -> RunSummary:
    """
    Convert every report PDF found under the configured input tree.

    Args:
        settings: Configuration settings object.
        fail_fast: Overrides ``settings.processing.fail_fast`` if not None. When true the
            first failing report stops the run; otherwise failures are collected and
            raised together once every report has been tried.
        extractor: Text extraction function.
        verbose: If True, shows a progress bar.

    Returns:
        RunSummary of the run.

    Raises:
        ReportConversionError: The first failure when failing fast.
        ConversionFailed: Every failure when isolating failures per report.
        MissingOutputDirectory: If the output directory is missing and not created.
    """
    start_time = time.time()
    fail_fast = settings.processing.fail_fast if fail_fast is None else fail_fast
    paths = settings.paths

    directory = StateDirectory.load(paths.state_table)

    settings.ensure_directories()
    if not paths.output.is_dir():
        raise MissingOutputDirectory(f"Output directory not found: {paths.output}")

    templates = copy_templates(paths.templates, paths.output)
    sink = CsvOutputManager(
        paths.output,
        gender_header=settings.reports.gender_header,
        binary_header=settings.reports.binary_header,
        gender_marker=settings.reports.gender_marker,
        templates=templates,
    )

    pdf_files = discover_reports(
        paths.input_root, extra_roots=[paths.pdf_subdir], exclude=[paths.templates]
    )
    logger.info("Found %d report PDF(s) under %s", len(pdf_files), paths.input_root)

    summary = RunSummary()
    pbar = tqdm(pdf_files, desc="Converting reports", unit="PDF", disable=not verbose)

    for pdf_path in pbar:
        try:
            descriptor = route(pdf_path.name)
            if not is_selected(descriptor, settings.reports.yearly):
                logger.info("Skipping %s: '%s' is not a configured yearly report",
                            pdf_path.name, descriptor.output_base_name)
                summary.skipped.append(pdf_path.name)
                continue
            convert_report(pdf_path, directory, sink, extractor=extractor, descriptor=descriptor)
            summary.converted.append(pdf_path.name)
        except ReportConversionError as e:
            if fail_fast:
                raise
            logger.error("Failed to convert %s: %s", pdf_path.name, e)
            summary.failures.append((pdf_path.name, e))

    pbar.close()

    summary.records = dict(sink.written)
    summary.elapsed = round(time.time() - start_time, 2)

    logger.info(
        "Converted %d report(s), skipped %d, failed %d; %d record(s) in %d file(s) (%.2fs)",
        len(summary.converted),
        len(summary.skipped),
        len(summary.failures),
        summary.total_records,
        len(summary.records),
        summary.elapsed,
    )

    if summary.failures:
        raise ConversionFailed(summary.failures)

    return summary


def plan_conversion(settings: Settings) -> List[Tuple[Path, Optional[ReportDescriptor], str]]:
    """
    Describe what a run would do without extracting or writing anything.

    Returns:
        One ``(pdf_path, descriptor, action)`` tuple per discovered PDF, where action is
        "convert", "skip" or the routing error message.
    """
    paths = settings.paths
    plan = []
    for pdf_path in discover_reports(
        paths.input_root, extra_roots=[paths.pdf_subdir], exclude=[paths.templates]
    ):
        try:
            descriptor = route(pdf_path.name)
        except ReportConversionError as e:
            plan.append((pdf_path, None, str(e)))
            continue
        action = "convert" if is_selected(descriptor, settings.reports.yearly) else "skip"
        plan.append((pdf_path, descriptor, action))
    return plan
