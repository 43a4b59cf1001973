"""Entry point for running an analyzer with a run configuration."""

import asyncio

from analyzer_bench.analyzers.base import AnalysisOutput, Analyzer
from analyzer_bench.models.configuration import RunConfiguration


async def run_analysis(
    analyzer: Analyzer, configuration: RunConfiguration
) -> AnalysisOutput:
    """Run an analyzer and emit its output as configured.

    The logger handle is shared by the whole batch, so ``debug`` only decides
    whether this run traces itself; the handle's level is never touched.

    Args:
        analyzer: Analyzer bound to the solution under test
        configuration: Run options; ``input_dir`` must be the solution directory

    Returns:
        The analyzer output

    """
    log = analyzer.log
    if configuration.debug:
        log.debug("Analyzing %s", configuration.input_dir)
    output = await analyzer.analyze()
    serialized = output.to_json(templates=configuration.templates)

    if configuration.console:
        log.info("%s", serialized)

    if not configuration.dry:
        await asyncio.to_thread(configuration.output_path.write_text, serialized)
        if configuration.debug:
            log.debug("Wrote %s", configuration.output_path)

    return output
