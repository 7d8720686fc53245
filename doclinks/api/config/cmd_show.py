"""Show the effective configuration.

CLI: doclinks config
"""

from collections.abc import Iterator

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .ConfigError import ConfigError
from .DoclinksConfig import DoclinksConfig


def cmd_show() -> StageResult:
    """Show the configuration that a scan would use."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        path = DoclinksConfig.get_config_path()

        yield (0.5, "Loading configuration...")
        try:
            config = DoclinksConfig.load()
        except ConfigError as e:
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                path=str(path),
                exists=path.exists(),
                content={},
            ).model_dump(mode="python")
            result_obj.result = f"Invalid configuration: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        exists = path.exists()
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=[] if exists else [f"No config file at {path}, using defaults"],
            path=str(path),
            exists=exists,
            content=config.to_dict(),
        ).model_dump(mode="python")
        result_obj.result = f"Configuration from {path}" if exists else "Default configuration"
        result_obj.success = True

    return StageResult(announce="Loading configuration...", progress_callback=do_work)
