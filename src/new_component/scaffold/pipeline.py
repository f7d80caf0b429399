"""Component scaffolding pipeline.

Runs the fixed sequence of scaffolding states for one component:

    INIT -> ENSURE_PARENT_DIR -> COLLISION_CHECK -> CREATE_COMPONENT_DIR
    -> LOAD_TEMPLATE -> SUBSTITUTE -> FORMAT_AND_WRITE_COMPONENT
    -> MAYBE_WRITE_INDEX -> CONCLUSION

Each state runs only if the previous one succeeded. The first failure
ends the run and is recorded on the returned ScaffoldOutcome; anything
already created on disk is left in place.

There is no locking between COLLISION_CHECK and CREATE_COMPONENT_DIR,
so two concurrent runs for the same component can race.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from new_component.cli.output import ScaffoldReporter
from new_component.errors import ComponentExistsError
from new_component.render import Formatter, build_index_source, substitute
from new_component.resolver import ResolvedTemplate
from new_component.scaffold.templates import load_template


class ScaffoldState(str, Enum):
    INIT = "init"
    ENSURE_PARENT_DIR = "ensure_parent_dir"
    COLLISION_CHECK = "collision_check"
    CREATE_COMPONENT_DIR = "create_component_dir"
    LOAD_TEMPLATE = "load_template"
    SUBSTITUTE = "substitute"
    FORMAT_AND_WRITE_COMPONENT = "format_and_write_component"
    MAYBE_WRITE_INDEX = "maybe_write_index"
    CONCLUSION = "conclusion"


@dataclass
class ScaffoldOutcome:
    """Result channel for a pipeline run.

    Attributes:
        completed: States that finished, in order.
        skipped: Completed states that had nothing to do.
        failed_state: The state that raised, or None on success.
        error: The exception raised by failed_state, or None.
        written: Files written to disk, in order.
    """

    completed: list[ScaffoldState] = field(default_factory=list)
    skipped: list[ScaffoldState] = field(default_factory=list)
    failed_state: ScaffoldState | None = None
    error: Exception | None = None
    written: list[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def already_exists(self) -> bool:
        """True when the run was refused because the component exists."""
        return isinstance(self.error, ComponentExistsError)


class ScaffoldPipeline:
    """Create one component's directory and files from a template.

    Args:
        resolved: Selected template configuration and output paths.
        root: Directory that relative output paths are resolved against.
        prettify: Async formatter applied to every generated file.
        reporter: Progress/error output. Defaults to a stdout/stderr reporter.
        templates_dir: Directory of template files. Defaults to the
            bundled templates.
    """

    def __init__(
        self,
        resolved: ResolvedTemplate,
        *,
        root: Path,
        prettify: Formatter,
        reporter: ScaffoldReporter | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        self.resolved = resolved
        self.root = root
        self.prettify = prettify
        self.reporter = reporter or ScaffoldReporter()
        self.templates_dir = templates_dir

        self._template_text: str | None = None
        self._source: str | None = None

    def _abs(self, path: Path) -> Path:
        return self.root / path

    def _steps(
        self,
    ) -> list[tuple[ScaffoldState, Callable[[ScaffoldOutcome], Awaitable[None]]]]:
        return [
            (ScaffoldState.INIT, self._init),
            (ScaffoldState.ENSURE_PARENT_DIR, self._ensure_parent_dir),
            (ScaffoldState.COLLISION_CHECK, self._collision_check),
            (ScaffoldState.CREATE_COMPONENT_DIR, self._create_component_dir),
            (ScaffoldState.LOAD_TEMPLATE, self._load_template),
            (ScaffoldState.SUBSTITUTE, self._substitute),
            (ScaffoldState.FORMAT_AND_WRITE_COMPONENT, self._format_and_write_component),
            (ScaffoldState.MAYBE_WRITE_INDEX, self._maybe_write_index),
            (ScaffoldState.CONCLUSION, self._conclusion),
        ]

    async def run(self) -> ScaffoldOutcome:
        """Run every state in order, stopping at the first failure.

        Errors are reported through the reporter and recorded on the
        outcome rather than raised.
        """
        outcome = ScaffoldOutcome()
        for state, step in self._steps():
            try:
                await step(outcome)
            except Exception as exc:
                outcome.failed_state = state
                outcome.error = exc
                self.reporter.log_error(exc)
                return outcome
            outcome.completed.append(state)
        return outcome

    async def _init(self, outcome: ScaffoldOutcome) -> None:
        self.reporter.log_intro(
            name=self.resolved.component_name,
            directory=self.resolved.paths.component_dir.as_posix(),
            template=self.resolved.template_name,
        )

    async def _ensure_parent_dir(self, outcome: ScaffoldOutcome) -> None:
        # Single level only; missing grandparents are an error.
        parent = self._abs(Path(self.resolved.config.dir))
        if not parent.exists():
            parent.mkdir()
        else:
            outcome.skipped.append(ScaffoldState.ENSURE_PARENT_DIR)

    async def _collision_check(self, outcome: ScaffoldOutcome) -> None:
        component_dir = self.resolved.paths.component_dir
        if self._abs(component_dir).exists():
            raise ComponentExistsError(component_dir.as_posix())

    async def _create_component_dir(self, outcome: ScaffoldOutcome) -> None:
        self._abs(self.resolved.paths.component_dir).mkdir()
        self.reporter.log_item_completion("Directory created.")

    async def _load_template(self, outcome: ScaffoldOutcome) -> None:
        self._template_text = load_template(
            self.resolved.template_name, self.templates_dir
        )

    async def _substitute(self, outcome: ScaffoldOutcome) -> None:
        assert self._template_text is not None
        self._source = substitute(self._template_text, self.resolved.component_name)

    async def _format_and_write_component(self, outcome: ScaffoldOutcome) -> None:
        assert self._source is not None
        formatted = await self.prettify(self._source)
        self._write(self.resolved.paths.component_file, formatted, outcome)
        self.reporter.log_item_completion("Component built and saved to disk.")

    async def _maybe_write_index(self, outcome: ScaffoldOutcome) -> None:
        if not self.resolved.config.index:
            outcome.skipped.append(ScaffoldState.MAYBE_WRITE_INDEX)
            return
        formatted = await self.prettify(
            build_index_source(self.resolved.component_name)
        )
        self._write(self.resolved.paths.index_file, formatted, outcome)
        self.reporter.log_item_completion("Index file built and saved to disk.")

    async def _conclusion(self, outcome: ScaffoldOutcome) -> None:
        self.reporter.log_conclusion()

    def _write(self, path: Path, content: str, outcome: ScaffoldOutcome) -> None:
        target = self._abs(path)
        target.write_text(content, encoding="utf-8")
        outcome.written.append(target)
