"""Write generated markdown, optionally through a Jinja2 page template."""

import logging
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from cmd_doc.docgen import Command, generate_markdown

logger = logging.getLogger(__name__)


@dataclass
class Config:
    header: str = ""
    footer: str = ""
    template_dir: Path | None = None
    template_name: str | None = None

    def render(self, command: Command) -> str:
        """Return the document for ``command``.

        Without a template the markdown is wrapped in the header and footer
        as-is, no extra newlines. With a template, the template is rendered
        with ``markdown``, ``command``, ``name``, ``header`` and ``footer``
        in its context.
        """
        if command is None:
            raise ValueError("nil command")

        markdown = generate_markdown(command)
        if self.template_name is None:
            return self.header + markdown + self.footer

        env = Environment(
            loader=FileSystemLoader(str(self.template_dir or Path.cwd())),
            keep_trailing_newline=True,
        )
        template = env.get_template(self.template_name)
        logger.debug("rendering template %s", template.filename)
        return template.render(
            markdown=markdown,
            command=command,
            name=command.name(),
            header=self.header,
            footer=self.footer,
        )

    def write(self, command: Command, stream) -> None:
        stream.write(self.render(command))
