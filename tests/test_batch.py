"""
Tests for the batch driver and progress reporting.
"""

import pytest

from tnt.rename import batch
from tnt.rename.core import BatchItem
from tnt.rename.errors import ItemParseError, ItemReadError, ListFileError
from tnt.utils import STATUS_DRY_RUN, STATUS_OK


def _names(directory) -> list[str]:
    return sorted(p.name for p in directory.iterdir())


class TestRun:
    def test_processes_every_item(self, sidecar, write_sidecar, write_list, out_dir) -> None:
        first = write_sidecar("a.json", sidecar)
        sidecar["episode"] = 4
        second = write_sidecar("b.json", sidecar)

        report = batch.run(write_list([first, second]), output_dir=out_dir, show_progress=False)

        assert report.total == 2
        assert report.succeeded == 2
        assert report.failed == 0
        assert _names(out_dir) == ["Kot_v_sapogah_s01e03_a.json", "Kot_v_sapogah_s01e04_b.json"]

    def test_failed_item_does_not_stop_the_batch(self, sidecar, write_sidecar, write_list, out_dir) -> None:
        first = write_sidecar("one.json", sidecar)
        broken = write_sidecar("two.json", b"{ not json")
        sidecar["episode"] = 5
        third = write_sidecar("three.json", sidecar)

        report = batch.run(write_list([first, broken, third]), output_dir=out_dir, show_progress=False)

        assert [item.index for item in report.items] == [1, 2, 3]
        assert report.items[0].ok and report.items[2].ok
        assert isinstance(report.items[1].error, ItemParseError)
        assert report.failures() == [report.items[1]]
        assert _names(out_dir) == ["Kot_v_sapogah_s01e03_one.json", "Kot_v_sapogah_s01e05_three.json"]

    def test_unencodable_text_does_not_stop_the_batch(self, sidecar, write_sidecar, write_list, out_dir) -> None:
        first = write_sidecar("one.json", sidecar)
        surrogate = write_sidecar("two.json", b'{"project": "kot", "season": 1, "episode": 2, "description": "\\ud800"}')
        sidecar["episode"] = 5
        third = write_sidecar("three.json", sidecar)

        report = batch.run(write_list([first, surrogate, third]), output_dir=out_dir, show_progress=False)

        assert report.total == 3
        assert isinstance(report.items[1].error, ItemParseError)
        assert _names(out_dir) == ["Kot_v_sapogah_s01e03_one.json", "Kot_v_sapogah_s01e05_three.json"]

    def test_path_with_null_byte_is_an_item_failure(self, sidecar, write_sidecar, write_list, out_dir) -> None:
        good = write_sidecar("good.json", sidecar)

        report = batch.run(write_list(["bad\x00.json", good]), output_dir=out_dir, show_progress=False)

        assert isinstance(report.items[0].error, ItemReadError)
        assert report.items[1].ok
        assert _names(out_dir) == ["Kot_v_sapogah_s01e03_good.json"]

    def test_unreadable_item_is_reported(self, sidecar, write_sidecar, write_list, tmp_path, out_dir) -> None:
        good = write_sidecar("good.json", sidecar)

        report = batch.run(write_list([tmp_path / "gone.json", good]), output_dir=out_dir, show_progress=False)

        assert isinstance(report.items[0].error, ItemReadError)
        assert report.items[1].ok
        assert report.failed == 1

    def test_dry_run(self, sidecar, write_sidecar, write_list, out_dir) -> None:
        source = write_sidecar("a.json", sidecar)

        report = batch.run(write_list([source]), output_dir=out_dir, dry_run=True, show_progress=False)

        assert report.count(STATUS_DRY_RUN) == 1
        assert report.count(STATUS_OK) == 0
        assert list(out_dir.iterdir()) == []

    def test_missing_list_file_is_fatal(self, tmp_path, out_dir) -> None:
        with pytest.raises(ListFileError):
            batch.run(tmp_path / "missing.txt", output_dir=out_dir, show_progress=False)
        assert list(out_dir.iterdir()) == []

    @pytest.mark.parametrize("content", ["", "\n\n  \n"])
    def test_empty_list_file_is_fatal(self, tmp_path, out_dir, content) -> None:
        list_file = tmp_path / "files.txt"
        list_file.write_text(content, encoding="utf-8")
        with pytest.raises(ListFileError):
            batch.run(list_file, output_dir=out_dir, show_progress=False)

    def test_prints_one_line_per_item(self, sidecar, write_sidecar, write_list, out_dir, capsys) -> None:
        source = write_sidecar("a.json", sidecar)
        broken = write_sidecar("b.json", b"[]")

        batch.run(write_list([source, broken]), output_dir=out_dir)

        out = capsys.readouterr().out
        assert "1/2 a.json > Kot_v_sapogah_s01e03_a.json" in out
        assert "2/2 b.json  ❌ [parse]" in out


class TestProgressReporter:
    @pytest.mark.parametrize(
        "total, index, expected",
        [(9, 3, "3/9"), (12, 3, "03/12"), (100, 7, "007/100"), (1, 1, "1/1")],
    )
    def test_prefix_is_padded_to_total_width(self, total, index, expected) -> None:
        assert batch.ProgressReporter(total).prefix(index) == expected

    def test_formats_success(self) -> None:
        item = BatchItem(index=2, source="/in/a.json", name="a.json", status=STATUS_OK, new_name="Kot_s01e01_a.json")
        assert batch.ProgressReporter(10).format(item) == "02/10 a.json > Kot_s01e01_a.json"

    def test_formats_dry_run(self) -> None:
        item = BatchItem(index=1, source="a.json", name="a.json", status=STATUS_DRY_RUN, new_name="Kot_s01e01_a.json")
        assert batch.ProgressReporter(1).format(item) == "1/1 a.json > Kot_s01e01_a.json (dry-run)"

    def test_formats_failure(self) -> None:
        item = BatchItem(index=1, source="a.json", name="a.json", error=ItemParseError("malformed JSON"))
        assert batch.ProgressReporter(1).format(item) == "1/1 a.json  ❌ [parse] malformed JSON"

    def test_disabled_prints_nothing(self, capsys) -> None:
        item = BatchItem(index=1, source="a.json", name="a.json", status=STATUS_OK, new_name="x")
        batch.ProgressReporter(1, enabled=False).report(item)
        assert capsys.readouterr().out == ""
