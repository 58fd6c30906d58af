"""Tests for the rename controller and its persisted sequence settings.

Author: Michael Economou
Date: 2026-10-06
"""

import json
import threading

import pytest

from dropname.controllers import RenameController
from dropname.models.rename_command import CommandError, FixedConfig, RenameCommand, SerialConfig
from dropname.models.rename_result import RenameStatus
from dropname.utils.shared.json_config_manager import JSONConfigManager


@pytest.fixture
def config_dir(tmp_path):
    return tmp_path / "config"


def make_controller(config_dir, **kwargs) -> RenameController:
    manager = JSONConfigManager("dropname", config_dir=config_dir)
    controller = RenameController(config_manager=manager, **kwargs)
    manager.load()
    return controller


SERIAL = RenameCommand.of(SerialConfig(prefix="n", pad=2))


def test_batch_policy_uses_command_number(config_dir, make_files):
    controller = make_controller(config_dir)
    controller.set_serial_start(5)

    report = controller.handle_drop(
        make_files("a.txt", "b.txt"), RenameCommand.of(SerialConfig(prefix="n", number=5, pad=2))
    )

    assert [r.new_name for r in report.results] == ["n05.txt", "n06.txt"]
    assert controller.next_value == 5


def test_payload_number_wins_over_configured_start(config_dir, make_files):
    controller = make_controller(config_dir)
    controller.set_serial_start(1)

    report = controller.handle_payload(
        make_files("IMG1.png", "IMG2.png"),
        {"mode": "Serial", "config": {"prefix": "V_", "number": 10, "pad": 3}},
    )

    assert [r.new_name for r in report.results] == ["V_010.png", "V_011.png"]
    assert controller.next_value == 1


def test_manual_policy_ignores_command_number(config_dir, make_files):
    controller = make_controller(config_dir)
    controller.set_manual_increment(True)

    report = controller.handle_drop(
        make_files("a.txt"), RenameCommand.of(SerialConfig(prefix="n", number=40, pad=2))
    )

    assert report.results[0].new_name == "n01.txt"
    assert controller.next_value == 2


def test_manual_increment_persists_between_controllers(config_dir, make_files):
    controller = make_controller(config_dir)
    controller.set_manual_increment(True)
    report = controller.handle_drop(make_files("a.txt", "b.txt", "c.txt"), SERIAL)
    assert [r.new_name for r in report.results] == ["n01.txt", "n02.txt", "n03.txt"]
    assert controller.next_value == 4

    reopened = make_controller(config_dir)
    assert reopened.manual_increment
    report = reopened.handle_drop(make_files("d.txt", "e.txt"), SERIAL)
    assert [r.new_name for r in report.results] == ["n04.txt", "n05.txt"]
    assert reopened.next_value == 6

    saved = json.loads((config_dir / "config.json").read_text(encoding="utf-8"))
    assert saved["sequence"]["next_value"] == 6


def test_enabling_manual_resets_counter_to_start(config_dir):
    controller = make_controller(config_dir)
    controller.set_serial_start(3)
    controller.set_manual_increment(True)
    assert controller.next_value == 3

    # Changing start while manual is on leaves the running counter alone
    controller.set_serial_start(50)
    assert controller.next_value == 3

    controller.set_manual_increment(True)
    assert controller.next_value == 3

    controller.set_manual_increment(False)
    controller.set_manual_increment(True)
    assert controller.next_value == 50


def test_reset_counter(config_dir, make_files):
    controller = make_controller(config_dir)
    controller.set_manual_increment(True)
    controller.handle_drop(make_files("a.txt"), SERIAL)
    assert controller.next_value == 2
    controller.reset_counter()
    assert controller.next_value == 1


def test_dry_run_keeps_manual_counter(config_dir, make_files, drop_dir):
    controller = make_controller(config_dir)
    controller.set_manual_increment(True)

    report = controller.handle_drop(make_files("a.txt"), SERIAL, dry_run=True)

    assert report.dry_run
    assert report.results[0].new_name == "n01.txt"
    assert controller.next_value == 1
    assert (drop_dir / "a.txt").exists()


def test_events_and_history(config_dir, make_files):
    controller = make_controller(config_dir, history_size=3)
    renamed, finished, sequence = [], [], []
    controller.file_renamed.connect(renamed.append)
    controller.batch_finished.connect(finished.append)
    controller.sequence_changed.connect(sequence.append)

    controller.set_manual_increment(True)
    report = controller.handle_drop(make_files("a.txt", "b.txt"), SERIAL)
    controller.handle_drop(make_files("c.txt", "d.txt"), SERIAL)

    assert [r.original_path for r in renamed[:2]] == [r.original_path for r in report.results]
    assert len(finished) == 2
    assert sequence == [1, 3, 5]

    history = controller.recent_results()
    assert len(history) == 3
    assert history[0].new_name == "n04.txt"
    assert history[-1].new_name == "n02.txt"

    controller.clear_history()
    assert controller.recent_results() == []


def test_handle_payload(config_dir, make_files):
    controller = make_controller(config_dir)
    report = controller.handle_payload(
        make_files("photo.jpg"), {"mode": "Fixed", "config": {"name": "x", "keep_ext": True}}
    )
    assert report.results[0].to_payload()["new_name"] == "x.jpg"


def test_handle_payload_rejects_bad_command(config_dir, make_files, drop_dir):
    controller = make_controller(config_dir)
    with pytest.raises(CommandError):
        controller.handle_payload(make_files("a.txt"), {"mode": "Nope"})
    assert (drop_dir / "a.txt").exists()


def test_empty_drop(config_dir):
    controller = make_controller(config_dir)
    report = controller.handle_drop([], SERIAL)
    assert report.results == []
    assert report.all_succeeded


def test_concurrent_drops_never_reuse_numbers(config_dir, drop_dir):
    controller = make_controller(config_dir)
    controller.set_manual_increment(True)
    groups = []
    for group in range(4):
        names = [f"g{group}_{i}.txt" for i in range(5)]
        for name in names:
            (drop_dir / name).write_text("x", encoding="utf-8")
        groups.append([str(drop_dir / name) for name in names])

    command = RenameCommand.of(SerialConfig(prefix="n", pad=3, keep_original=True))
    threads = [
        threading.Thread(target=controller.handle_drop, args=(paths, command))
        for paths in groups
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    numbers = sorted(int(name[-7:-4]) for name in (p.name for p in drop_dir.iterdir()))
    assert numbers == list(range(1, 21))
    assert controller.next_value == 21


def test_default_config_manager_uses_user_data_dir(isolated_data_dir, make_files):
    controller = RenameController()
    controller.set_manual_increment(True)
    controller.handle_drop(make_files("a.txt"), RenameCommand.of(FixedConfig(name="b")))
    assert (isolated_data_dir / "config.json").exists()
    assert RenameController().next_value == 2
    assert controller.recent_results()[0].status is RenameStatus.SUCCESS


def test_receiver_may_change_settings_during_a_batch(config_dir, make_files):
    controller = make_controller(config_dir)
    controller.set_manual_increment(True)
    controller.file_renamed.connect(lambda _result: controller.reset_counter())
    paths = make_files("a.txt", "b.txt")
    outcome = []

    worker = threading.Thread(
        target=lambda: outcome.append(controller.handle_drop(paths, SERIAL))
    )
    worker.start()
    worker.join(timeout=5)

    assert not worker.is_alive()
    assert [r.new_name for r in outcome[0].results] == ["n01.txt", "n02.txt"]
    # The counter reached by the batch is stored after the receivers ran
    assert controller.next_value == 3


def test_settings_without_autosave_stay_in_memory(config_dir):
    controller = make_controller(config_dir, autosave=False)
    controller.set_serial_start(9)
    controller.set_manual_increment(True)

    assert controller.next_value == 9
    assert not (config_dir / "config.json").exists()
    assert make_controller(config_dir).serial_start == 1
