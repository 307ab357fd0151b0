"""BuildService — build identity query and build-step metadata export."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from hkgshell.domain.build_info import metadata_env_lines, metadata_payload
from hkgshell.domain.build_number import current_epoch_minutes
from hkgshell.services.base import BaseService
from hkgshell.services.result import ServiceError, ServiceResult

GITHUB_ENV_VAR = "GITHUB_ENV"

logger = logging.getLogger(__name__)


class BuildService(BaseService):
    """Exposes the baked build identity and produces build metadata."""

    def info(self) -> ServiceResult:
        """Return the ``get_build_info`` payload."""
        payload = self._shell.invoke("get_build_info")
        return ServiceResult(ok=True, op="get_build_info", data=payload)

    @staticmethod
    def metadata(
        *,
        output: Path | None = None,
        now: float | None = None,
    ) -> ServiceResult:
        """Compute fresh build metadata for the current minute.

        Needs no shell: the metadata describes the build being produced,
        not the identity baked into this process.

        Writes the JSON payload to *output* when given (creating parent
        directories) and appends the ``KEY=value`` lines to the file named
        by ``GITHUB_ENV`` when that variable is set.
        """
        op = "build_metadata"
        minutes = current_epoch_minutes(now)
        payload = metadata_payload(minutes)
        env_lines = metadata_env_lines(minutes)
        data: dict[str, object] = {**payload, "env": env_lines}

        try:
            if output is not None:
                output.parent.mkdir(parents=True, exist_ok=True)
                output.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
                data["output"] = str(output)
                logger.debug("Wrote build metadata to %s", output)

            github_env = os.environ.get(GITHUB_ENV_VAR)
            if github_env:
                with Path(github_env).open("a", encoding="utf-8") as fh:
                    fh.write("\n".join(env_lines) + "\n")
                data["github_env"] = github_env
        except OSError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="WRITE_FAILED",
                    message=f"Could not write build metadata: {exc}",
                    detail={"path": str(exc.filename or "")},
                ),
            )

        return ServiceResult(ok=True, op=op, data=data)
