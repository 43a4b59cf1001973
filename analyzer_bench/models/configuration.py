"""Configuration passed to a single analyzer invocation."""

from pathlib import Path

from pydantic import Field

from analyzer_bench.models.base import Model


class RunConfiguration(Model):
    """Options for one analyzer run against one solution directory."""

    debug: bool = Field(default=False, description="Trace the run through the logger")
    console: bool = Field(default=False, description="Echo the output to the log")
    dry: bool = Field(default=False, description="Skip writing the output file")
    output: Path = Field(
        default=Path("analysis.json"),
        description="Output file, relative to the input directory",
    )
    templates: bool = Field(
        default=True, description="Emit comment templates instead of messages"
    )
    input_dir: Path = Field(..., description="Directory holding the solution")

    @property
    def output_path(self) -> Path:
        """Output file resolved against the input directory."""
        return self.input_dir / self.output
