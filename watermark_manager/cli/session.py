"""
Interactive Session
===================
Collects a watermark request through prompts, checks the referenced files
and hands the request to the pipeline.

The session is a loop over four states instead of restarting itself:

    AWAIT_CONFIRMATION -> COLLECT_REQUEST -> RUNNING -> AWAIT_CONFIRMATION
           |                    |              |
           v                    |              v
          DONE   <--------------+ (missing   DONE (exit 1)
                   files restart at AWAIT_CONFIRMATION)

Failure handling is deliberately asymmetric:
- missing input/overlay files are reported and the session restarts;
- any pipeline failure prints an error and ends the session with status 1.
"""

import logging
from enum import Enum, auto
from typing import Callable, Optional

import click

from watermark_manager.config import Settings
from watermark_manager.core.edits import EditOption
from watermark_manager.pipeline import (
    ImageWatermark, TextWatermark, WatermarkPipeline, WatermarkRequest
)
from . import messages
from .paths import derive_output_filename, find_missing
from .prompts import Prompter

logger = logging.getLogger(__name__)


class SessionState(Enum):
    AWAIT_CONFIRMATION = auto()
    COLLECT_REQUEST = auto()
    RUNNING = auto()
    DONE = auto()


class InputCollector:
    """
    Drives the prompt sequence and the pipeline until the user quits or
    the pipeline fails.
    """

    def __init__(
            self,
            settings: Optional[Settings] = None,
            prompter: Optional[Prompter] = None,
            pipeline: Optional[WatermarkPipeline] = None,
            echo: Callable[[str], None] = click.echo
    ):
        self.settings = settings or Settings()
        self.prompter = prompter or Prompter()
        self.pipeline = pipeline or WatermarkPipeline(self.settings)
        self.echo = echo
        self.state = SessionState.AWAIT_CONFIRMATION

    def _ask_edit_options(self) -> tuple:
        if not self.prompter.confirm(messages.ASK_SHOULD_EDIT, default=True):
            return ()
        labels = self.prompter.choose_many(
            messages.ASK_EDIT_OPTIONS,
            [option.value for option in EditOption]
        )
        return tuple(EditOption(label) for label in labels)

    def collect_request(self) -> Optional[WatermarkRequest]:
        """
        Ask for everything a run needs and validate the files.

        Returns:
            A ready request, or None when referenced files are missing.
        """
        images_dir = self.settings.images_dir

        input_name = self.prompter.text(
            messages.ASK_INPUT_FILE, default=self.settings.default_input_name
        )
        watermark_type = self.prompter.choose(
            messages.ASK_WATERMARK_TYPE, messages.WATERMARK_TYPES
        )
        edit_options = self._ask_edit_options()

        input_path = images_dir / input_name
        output_path = images_dir / derive_output_filename(
            input_name, self.settings.output_suffix
        )

        if watermark_type == messages.TEXT_WATERMARK:
            # Blank text is allowed and draws nothing
            text = self.prompter.text(messages.ASK_WATERMARK_TEXT, default="", show_default=False)
            kind = TextWatermark(text=text)
            required = [input_path]
        else:
            overlay_name = self.prompter.text(
                messages.ASK_WATERMARK_IMAGE, default=self.settings.default_overlay_name
            )
            overlay_path = images_dir / overlay_name
            kind = ImageWatermark(overlay_path=overlay_path)
            required = [input_path, overlay_path]

        missing = find_missing(*required)
        if missing:
            logger.info("Pre-flight check failed, missing: %s", missing)
            self.echo(messages.NO_SUCH_FILES.format(
                paths=", ".join(str(p) for p in missing)
            ))
            return None

        return WatermarkRequest(
            input_path=input_path,
            output_path=output_path,
            kind=kind,
            edit_options=edit_options
        )

    def run(self) -> int:
        """
        Run the session until it ends.

        Returns:
            Process exit status: 0 when the user quits, 1 after a pipeline failure.
        """
        request: Optional[WatermarkRequest] = None
        exit_code = 0
        self.state = SessionState.AWAIT_CONFIRMATION

        while self.state is not SessionState.DONE:
            logger.debug("Session state: %s", self.state.name)

            if self.state is SessionState.AWAIT_CONFIRMATION:
                welcome = messages.WELCOME.format(folder=self.settings.images_dir.as_posix())
                if self.prompter.confirm(welcome, default=True):
                    self.state = SessionState.COLLECT_REQUEST
                else:
                    self.state = SessionState.DONE

            elif self.state is SessionState.COLLECT_REQUEST:
                request = self.collect_request()
                if request is None:
                    self.echo(messages.RESTART)
                    self.state = SessionState.AWAIT_CONFIRMATION
                else:
                    self.state = SessionState.RUNNING

            elif self.state is SessionState.RUNNING:
                result = self.pipeline.process(request)
                request = None
                if result.success:
                    self.echo(messages.SUCCESS.format(output=result.output_path))
                    self.state = SessionState.AWAIT_CONFIRMATION
                else:
                    self.echo(messages.ERROR)
                    exit_code = 1
                    self.state = SessionState.DONE

        self.pipeline.cleanup()
        return exit_code
