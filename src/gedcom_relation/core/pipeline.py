from __future__ import annotations

from gedcom_relation.core.context import ParseContext
from gedcom_relation.core.exceptions import ParseExecutionError
from gedcom_relation.exporter import export_document_json
from gedcom_relation.loader import GedcomSyntaxError
from gedcom_relation.parser_core import GEDCOMParser
from gedcom_relation.registry import RelationDocument

PRETTY_INDENT = 2

# Bad input rather than a bug: reported as one line, traceback kept at DEBUG.
INPUT_ERRORS = (GedcomSyntaxError, OSError, UnicodeDecodeError)


class Pipeline:
    """
    Orchestrates the GEDCOM -> relational JSON pipeline.
    No business logic lives here.
    """

    def __init__(self, context: ParseContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> RelationDocument:
        self.log.info("Pipeline starting: %s", self.ctx.input_path)

        try:
            parser = GEDCOMParser(config=self.ctx.config)
            document = parser.run(self.ctx.input_path)

            self.ctx.stats.update(document.counts())
            self.ctx.stats["lines"] = len(parser.lines)

            if self.ctx.output_path:
                indent = PRETTY_INDENT if self.ctx.pretty else None
                export_document_json(document, self.ctx.output_path, indent=indent)

            self.log.info("Pipeline completed successfully")

            return document

        except INPUT_ERRORS as exc:
            self.ctx.errors.append(str(exc))
            self.log.error("Pipeline execution failed: %s", exc)
            self.log.debug("Failure detail", exc_info=True)
            raise ParseExecutionError(str(exc)) from exc

        except Exception as exc:
            self.ctx.errors.append(str(exc))
            self.log.exception("Pipeline execution failed")
            raise ParseExecutionError(str(exc)) from exc
