from jmeter_cli.command_builder import build_jmeter_command, resolve_run_paths
from jmeter_cli.jmeter_executor import CommandResult, JMeterExecutor

__all__ = [
    "build_jmeter_command",
    "resolve_run_paths",
    "CommandResult",
    "JMeterExecutor",
]
