"""Main processing pipeline: load input, convert and/or analyze, write output."""

import io
from pathlib import Path
import sys
import time

from loguru import logger
from tqdm import tqdm

from textconvert.core.analysis import analyze
from textconvert.core.config import Config
from textconvert.data.files import TextDocument, combine_documents, load_text_files
from textconvert.reports.analysis import format_analysis_report, report_to_dict
from textconvert.reports.helpers import write_structured
from textconvert.reports.history import format_conversion_list, format_history
from textconvert.session.history import ConversionHistory, perform_conversion
from textconvert.utils import Constants, expand_file_path, write_file_safely


def load_documents(config: Config) -> list[TextDocument]:
    """Collect input from --text, input files or stdin, in that order of preference."""
    if config.text is not None:
        return [TextDocument(name="text", content=config.text, size=len(config.text.encode()))]
    if config.inputs:
        return load_text_files(config.inputs, verbose=config.verbose)
    content = sys.stdin.read()
    return [TextDocument(name="stdin", content=content, size=len(content.encode()))]


def _iterate(documents: list[TextDocument], config: Config, desc: str):
    if config.verbose and len(documents) > 1:
        return tqdm(documents, desc=desc, unit="file")
    return documents


def run_conversions(
    documents: list[TextDocument], config: Config, history: ConversionHistory
) -> list[TextDocument]:
    """Apply the configured conversion to each document.

    Blank documents are skipped with a warning and produce no history entry.
    """
    converted = []
    for doc in _iterate(documents, config, "Converting"):
        output = perform_conversion(config.conversion, doc.content, history)
        if output is None:
            logger.warning(f"⚠️  Nothing to convert in {doc.name} (input is blank)")
            continue
        logger.debug(f"{config.conversion.value}: {doc.name} ({len(doc.content)} chars)")
        converted.append(TextDocument(name=doc.name, content=output, size=len(output.encode())))
    return converted


def render_conversions(converted: list[TextDocument]) -> str:
    if len(converted) == 1:
        return converted[0].content
    return combine_documents(converted)


def render_analysis(
    documents: list[TextDocument],
    config: Config,
    converted: list[TextDocument] | None = None,
) -> str:
    """Analyze each document and render the reports in the configured format.

    When ``converted`` is given, structured formats carry each document's
    converted text (None for blank input) beside its analysis so the
    output stays one valid JSON or YAML document.
    """
    reports = {doc.name: analyze(doc.content) for doc in _iterate(documents, config, "Analyzing")}

    if config.output_format == "text":
        return "\n".join(
            format_analysis_report(report, title=f"Text Analysis: {name}")
            for name, report in reports.items()
        )

    entries = {name: report_to_dict(report) for name, report in reports.items()}
    if converted is not None:
        outputs = {doc.name: doc.content for doc in converted}
        entries = {
            name: {"converted": outputs.get(name), "analysis": entry}
            for name, entry in entries.items()
        }

    payload = next(iter(entries.values())) if len(entries) == 1 else entries
    buffer = io.StringIO()
    write_structured(payload, buffer, config.output_format)
    return buffer.getvalue()


def write_output(content: str, config: Config, default_name: str) -> None:
    """Write to the configured output, or stdout when none is set.

    An existing directory as output receives a file named ``default_name``.
    """
    if config.output:
        target = Path(expand_file_path(config.output) or config.output)
        if target.is_dir():
            target = target / default_name
        write_file_safely(target, lambda f: f.write(content), "writing output")
        if config.verbose:
            logger.info(f"  Wrote {target}")
    else:
        sys.stdout.write(content)


def run_pipeline(config: Config) -> ConversionHistory:
    """Run a full conversion and/or analysis pass.

    Args:
        config: Validated configuration

    Returns:
        The history of conversions made during the run
    """
    start_time = time.time()
    history = ConversionHistory(capacity=config.history_size)

    if config.list_conversions:
        write_output(format_conversion_list(), config, Constants.CONVERSIONS_FILENAME)
        return history

    documents = load_documents(config)
    sections = []
    default_name = Constants.ANALYSIS_FILENAME

    structured = config.analyze and config.output_format != "text"
    converted = None

    if config.conversion:
        converted = run_conversions(documents, config, history)
        if converted and not structured:
            sections.append(render_conversions(converted))
            default_name = (
                Constants.CONVERTED_FILENAME
                if len(converted) == 1
                else Constants.COMBINED_FILENAME
            )

    if config.analyze:
        sections.append(render_analysis(documents, config, converted))

    if sections:
        write_output("\n".join(sections), config, default_name)

    if config.show_history:
        sys.stderr.write(format_history(history))

    if config.verbose:
        logger.info(f"  Processed {len(documents)} document(s) in {time.time() - start_time:.2f}s")
    return history
