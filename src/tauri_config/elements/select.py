from dataclasses import dataclass
from typing import Dict, Generator, Iterator, Optional

import click

from ..common import SelectionCancelled, logger
from ..pipelineElement import PipelineElement

# Channel name -> schema location
SCHEMA_CHANNELS: Dict[str, str] = {
    "dev": "https://raw.githubusercontent.com/tauri-apps/tauri/dev/core/tauri-config-schema/schema.json",
}

@dataclass
class SelectSchemaInput:
    """Input specification for SelectSchema

    source: explicit schema URL or path; skips the prompt
    channel: channel name to use without prompting
    """
    source: Optional[str] = None
    channel: Optional[str] = None
    message: Optional[str] = None

class SelectSchema(PipelineElement):
    """Decide which schema to fetch, asking the user when nothing was given"""

    def __init__(self, channels: Optional[Dict[str, str]] = None, message: str = "Which version do you want?", source: Optional[str] = None, channel: Optional[str] = None):
        super().__init__()  # Automatically captures all constructor parameters
        self.channels = channels or SCHEMA_CHANNELS

    def _prompt(self, message: str) -> str:
        names = list(self.channels)
        try:
            return click.prompt(message, type=click.Choice(names), default=names[0], show_choices=True)
        except click.Abort as ex:
            raise SelectionCancelled("Schema selection was cancelled") from ex

    def process(self, input: Iterator[SelectSchemaInput]) -> Generator[str, None, None]:
        for selection in input:
            selection = self.apply_defaults(selection)

            if selection.source:
                logger().info(f"Using schema {selection.source}")
                yield selection.source
                continue

            channel = selection.channel or self._prompt(selection.message)
            if channel not in self.channels:
                raise ValueError(f"Unknown schema channel '{channel}', expected one of {', '.join(self.channels)}")
            logger().info(f"Using the {channel} schema: {self.channels[channel]}")
            yield self.channels[channel]
