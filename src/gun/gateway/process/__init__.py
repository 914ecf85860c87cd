"""External process execution."""

from gun.gateway.process.abc import ProcessRunner as ProcessRunner
from gun.gateway.process.types import ExternalCommandError as ExternalCommandError
from gun.gateway.process.types import ProcessResult as ProcessResult
