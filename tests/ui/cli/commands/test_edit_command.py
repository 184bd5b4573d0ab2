"""Tests for the ``edit`` command."""

from collections.abc import Callable
from pathlib import Path

from vidcat.features.catalog import (
    EditOutcome,
    MappingMetadataProvider,
    MetadataRecord,
    RecordStore,
)
from vidcat.ui.cli.args.options import CatalogOptions, EditArgs
from vidcat.ui.cli.commands import EditCommand, PromptEditingSurface
from vidcat.ui.cli.display.record import RecordDisplay


def _provider_factory(path: Path) -> MappingMetadataProvider:
    return MappingMetadataProvider({"Title": path.stem})


class _DecliningSurface:
    def edit(self, record: MetadataRecord) -> EditOutcome:
        return EditOutcome(record=record.with_field("Genre", "Ignored"), confirmed=False)


def test_edit_applies_assignments_and_saves(
    tmp_path: Path,
    options: CatalogOptions,
    display: RecordDisplay,
    output: Callable[[], str],
) -> None:
    args = EditArgs(
        command="edit",
        media_path=tmp_path / "Inception.mp4",
        options=options,
        assignments={"Director": "Christopher Nolan"},
        assume_yes=True,
    )

    result = EditCommand(args, provider_factory=_provider_factory, display=display).execute()

    assert result is not None
    stored = RecordStore.load(options.catalog_path).find_by_key("Inception")
    assert stored is not None
    assert stored.get("Director") == "Christopher Nolan"
    assert stored.get("Genre") == "null"
    assert "Saved 'Inception'" in output()


def test_edit_builds_prompt_surface_from_args(
    tmp_path: Path, options: CatalogOptions, display: RecordDisplay
) -> None:
    args = EditArgs(command="edit", media_path=tmp_path / "Inception.mp4", options=options)

    command = EditCommand(args, provider_factory=_provider_factory, display=display)

    assert isinstance(command.surface, PromptEditingSurface)


def test_declined_edit_writes_nothing(
    tmp_path: Path,
    options: CatalogOptions,
    display: RecordDisplay,
    output: Callable[[], str],
) -> None:
    args = EditArgs(command="edit", media_path=tmp_path / "Inception.mp4", options=options)

    result = EditCommand(
        args,
        provider_factory=_provider_factory,
        surface=_DecliningSurface(),
        display=display,
    ).execute()

    assert result is None
    assert not options.catalog_path.exists()
    assert "No changes saved." in output()


def test_quiet_edit_prints_nothing(
    tmp_path: Path,
    options: CatalogOptions,
    display: RecordDisplay,
    output: Callable[[], str],
) -> None:
    options.quiet = True
    args = EditArgs(command="edit", media_path=tmp_path / "Inception.mp4", options=options)

    _ = EditCommand(
        args,
        provider_factory=_provider_factory,
        surface=_DecliningSurface(),
        display=display,
    ).execute()

    assert output() == ""
