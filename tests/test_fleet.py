from __future__ import annotations

import asyncio
import logging

import pytest

from printfleet.exceptions import FleetResponseError, FleetValidationError
from printfleet.models.requests import CreatePrinter
from printfleet.models.results import CommandOutcome


def _new_printer(name: str) -> CreatePrinter:
    return CreatePrinter(printer_name=name, printer_url=f"http://{name}.local", api_key="key")


def _dated(*pairs: tuple[str, str]) -> list[dict[str, str]]:
    return [{"path": path, "date": date} for path, date in pairs]


# ------------------------------------------------------------------
# Printers
# ------------------------------------------------------------------


@pytest.mark.asyncio
async def test_load_printers_replaces_cache_sorted(fleet, backend, printer_payload) -> None:
    backend.printers = [printer_payload("2", "bravo"), printer_payload("1", "Alpha")]

    loaded = await fleet.load_printers()

    assert len(loaded) == 2
    assert [p.name for p in fleet.printers.printers] == ["Alpha", "bravo"]


@pytest.mark.asyncio
async def test_create_printer_inserts_sorted(fleet, backend, printer_payload) -> None:
    backend.printers = [printer_payload("1", "Zulu")]
    await fleet.load_printers()

    created = await fleet.create_printer(_new_printer("alpha"))

    assert fleet.printer(created.id) is created
    assert [p.name for p in fleet.printers.printers] == ["alpha", "Zulu"]


@pytest.mark.asyncio
async def test_create_test_printer_does_not_touch_store(fleet) -> None:
    probe = await fleet.create_test_printer(_new_printer("probe"))

    assert fleet.test_printer is probe
    assert len(fleet.printers) == 0


@pytest.mark.asyncio
async def test_update_printer_replaces_record(fleet, backend, printer_payload) -> None:
    backend.printers = [printer_payload("1", "Old")]
    await fleet.load_printers()

    await fleet.update_printer("1", _new_printer("New"))

    assert fleet.printer("1").name == "New"


@pytest.mark.asyncio
async def test_update_unknown_printer_warns(fleet, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="printfleet.state.printers"):
        updated = await fleet.update_printer("ghost", _new_printer("Ghost"))

    assert updated.id == "ghost"
    assert fleet.printer("ghost") is None
    assert "ghost" in caplog.text


@pytest.mark.asyncio
async def test_delete_printer_purges_bucket_and_selection(fleet, backend, printer_payload) -> None:
    backend.printers = [printer_payload("1", "A"), printer_payload("2", "B")]
    backend.files = {"1": _dated(("a.gcode", "2024-01-01"))}
    await fleet.load_printers()
    await fleet.load_printer_files("1")
    fleet.toggle_selected_printer(fleet.printer("1"))
    fleet.toggle_selected_printer(fleet.printer("2"))

    await fleet.delete_printer("1")

    assert fleet.printer("1") is None
    assert fleet.printer_files("1") is None
    assert not fleet.is_selected_printer("1")
    assert fleet.is_selected_printer("2")
    assert backend.called("delete_printer") == [("1",)]


@pytest.mark.asyncio
async def test_refresh_purges_bucket_and_selection_of_vanished_printer(fleet, backend, printer_payload) -> None:
    backend.printers = [printer_payload("a", "A"), printer_payload("b", "B")]
    backend.files = {"b": _dated(("b.gcode", "2024-01-01"))}
    await fleet.load_printers()
    await fleet.load_printer_files("b")
    fleet.toggle_selected_printer(fleet.printer("a"))
    fleet.toggle_selected_printer(fleet.printer("b"))

    backend.printers = [printer_payload("a", "A")]
    await fleet.load_printers()

    assert fleet.selection.ids == ("a",)
    assert fleet.printer_files("b") is None

    await fleet.batch_reprint_files()
    assert backend.called("batch_reprint_files") == [(["a"],)]


@pytest.mark.asyncio
@pytest.mark.parametrize("call", ["update", "delete", "clear"])
async def test_empty_id_fails_before_remote_call(fleet, backend, call) -> None:
    with pytest.raises(FleetValidationError):
        if call == "update":
            await fleet.update_printer("", _new_printer("x"))
        elif call == "delete":
            await fleet.delete_printer("")
        else:
            await fleet.clear_printer_files("")

    assert backend.calls == []


@pytest.mark.asyncio
async def test_last_writer_wins_between_list_and_update(fleet, backend, printer_payload, make_printer) -> None:
    backend.printers = [printer_payload("1", "Listed")]
    release = asyncio.Event()
    original_list = backend.list_printers

    async def slow_list():
        await release.wait()
        return await original_list()

    backend.list_printers = slow_list
    fleet.printers.insert(make_printer("1", "Stale"))

    # The refresh is dispatched first but completes last, so its data wins.
    refresh = asyncio.create_task(fleet.load_printers())
    await asyncio.sleep(0)
    await fleet.update_printer("1", _new_printer("Updated"))
    assert fleet.printer("1").name == "Updated"

    release.set()
    await refresh
    assert fleet.printer("1").name == "Listed"


# ------------------------------------------------------------------
# Files
# ------------------------------------------------------------------


@pytest.mark.asyncio
async def test_load_printer_files_sorts_descending_and_returns_list(fleet, backend) -> None:
    backend.files = {"1": _dated(("jan", "2024-01-01"), ("mar", "2024-03-01"), ("feb", "2024-02-01"))}

    file_list = await fleet.load_printer_files("1", recursive=True)

    assert [f.path for f in file_list.files] == ["mar", "feb", "jan"]
    assert [f.date.month for f in fleet.printer_files("1")] == [3, 2, 1]
    assert backend.called("list_files") == [("1", True)]


@pytest.mark.asyncio
async def test_reloading_files_keeps_single_bucket(fleet, backend) -> None:
    backend.files = {"1": _dated(("a", "2024-01-01"))}
    await fleet.load_printer_files("1")
    bucket = fleet.files.bucket("1")

    backend.files = {"1": _dated(("b", "2024-02-01"))}
    await fleet.load_printer_files("1")

    assert fleet.files.bucket("1") is bucket
    assert len(fleet.files) == 1
    assert [f.path for f in bucket.files] == ["b"]


@pytest.mark.asyncio
async def test_delete_printer_file_removes_entry(fleet, backend) -> None:
    backend.files = {"1": _dated(("a", "2024-01-01"), ("b", "2024-02-01"))}
    await fleet.load_printer_files("1")

    remaining = await fleet.delete_printer_file("1", "a")

    assert [f.path for f in remaining] == ["b"]
    assert backend.called("delete_file") == [("1", "a")]


@pytest.mark.asyncio
async def test_delete_absent_file_leaves_bucket_unchanged(fleet, backend, caplog: pytest.LogCaptureFixture) -> None:
    backend.files = {"1": _dated(("a", "2024-01-01"))}
    await fleet.load_printer_files("1")
    before = fleet.printer_files("1")

    with caplog.at_level(logging.WARNING, logger="printfleet.state.files"):
        remaining = await fleet.delete_printer_file("1", "ghost.gcode")

    assert remaining == before
    assert fleet.printer_files("1") == before
    assert "ghost.gcode" in caplog.text


@pytest.mark.asyncio
async def test_delete_file_without_bucket_returns_none(fleet) -> None:
    assert await fleet.delete_printer_file("1", "a") is None


@pytest.mark.asyncio
async def test_clear_files_keeps_only_failed_files(fleet, backend) -> None:
    backend.files = {"1": _dated(("a", "2024-01-01"), ("b", "2024-02-01"), ("c", "2024-03-01"))}
    backend.clear_response = {"failedFiles": _dated(("a", "2024-01-01"), ("c", "2024-03-01"))}
    await fleet.load_printer_files("1")

    failed = await fleet.clear_printer_files("1")

    assert {f.path for f in failed} == {"a", "c"}
    assert [f.path for f in fleet.printer_files("1")] == ["c", "a"]


@pytest.mark.asyncio
async def test_clear_files_without_report_raises_and_keeps_bucket(fleet, backend) -> None:
    backend.files = {"1": _dated(("a", "2024-01-01"))}
    backend.clear_response = {"succeededFiles": []}
    await fleet.load_printer_files("1")
    before = fleet.printer_files("1")

    with pytest.raises(FleetResponseError):
        await fleet.clear_printer_files("1")

    assert fleet.printer_files("1") == before


@pytest.mark.asyncio
async def test_clear_files_without_bucket_does_not_create_one(fleet, backend) -> None:
    backend.clear_response = {"failedFiles": _dated(("a", "2024-01-01"))}

    await fleet.clear_printer_files("1")

    assert fleet.files.bucket("1") is None


# ------------------------------------------------------------------
# Selection, pointers and commands
# ------------------------------------------------------------------


@pytest.mark.asyncio
async def test_selected_printers_resolve_live_records(fleet, backend, printer_payload) -> None:
    backend.printers = [printer_payload("1", "A"), printer_payload("2", "B", reachable=False)]
    await fleet.load_printers()

    fleet.toggle_selected_printer(fleet.printer("1"))
    fleet.toggle_selected_printer(fleet.printer("2"))

    assert [p.id for p in fleet.selected_printers] == ["1"]

    fleet.clear_selected_printers()
    assert fleet.selected_printers == []


@pytest.mark.asyncio
async def test_view_pointers_delegate_to_store(fleet, backend, printer_payload) -> None:
    backend.printers = [printer_payload("1", "A")]
    await fleet.load_printers()

    fleet.set_side_nav_printer(fleet.printer("1"))
    fleet.set_update_dialog_printer("1")
    fleet.set_maintenance_dialog_printer("1")

    assert fleet.printers.side_nav_printer.id == "1"
    assert fleet.printers.update_dialog_printer.id == "1"
    assert fleet.printers.maintenance_dialog_printer.id == "1"


@pytest.mark.asyncio
async def test_job_commands_go_through_guards(fleet, backend, prompt, printer_payload) -> None:
    backend.printers = [
        printer_payload("busy", "Busy", printing=True),
        printer_payload("idle", "Idle", printing=False),
    ]
    await fleet.load_printers()

    blocked = await fleet.print_file("busy", "a.gcode")
    sent = await fleet.print_file("idle", "a.gcode")
    stopped = await fleet.stop_job("busy")

    assert blocked.outcome is CommandOutcome.BLOCKED
    assert sent.outcome is CommandOutcome.SENT
    assert stopped.outcome is CommandOutcome.SENT
    assert backend.called("select_and_print_file") == [("idle", "a.gcode", True)]
    assert prompt.messages


@pytest.mark.asyncio
async def test_batch_reprint_files(fleet, backend, printer_payload) -> None:
    backend.printers = [printer_payload("1", "A")]
    await fleet.load_printers()

    with pytest.raises(FleetValidationError):
        await fleet.batch_reprint_files()

    fleet.toggle_selected_printer(fleet.printer("1"))
    result = await fleet.batch_reprint_files()

    assert result.results == ["1"]
    assert not fleet.is_selected_printer("1")
