"""Tests for composing the final display."""

import pytest

from hostfetch.collectors.system_info import FIELD_NAMES, SystemInfo
from hostfetch.display.art import FLAT_COLOR, get_art
from hostfetch.display.colors import Color, strip_ansi, visible_len
from hostfetch.display.layout import GUTTER
from hostfetch.display.renderer import (
    INFO_LABELS,
    SEPARATOR,
    build_info_lines,
    format_header,
    render,
)


@pytest.fixture
def info():
    values = {name: f"<{name}>" for name in FIELD_NAMES}
    values.update(
        os_name="macOS",
        os_version="14.2.1",
        os_build="23C71",
        architecture="arm64",
        username="ada",
        hostname="engine",
        memory_used="8192",
        memory_total="16384",
        load_average_1="1.50",
        load_average_5="1.25",
        load_average_15="1.00",
        disk_used="120.50",
        disk_free="339.25",
        battery_charge="N/A",
    )
    return SystemInfo(**values)


class TestHeader:
    def test_user_at_host(self):
        header = format_header("ada", "engine")
        assert strip_ansi(header) == "ada@engine"
        assert header.count(Color.BRIGHT_GREEN.value) == 2


class TestBuildInfoLines:
    def test_header_and_separator(self, info):
        lines = build_info_lines(info)
        assert strip_ansi(lines[0]) == "ada@engine"
        assert lines[1] == SEPARATOR
        assert len(SEPARATOR) == 33

    def test_one_line_per_label_in_order(self, info):
        lines = build_info_lines(info)[2:]
        labels = [strip_ansi(line).split(": ", 1)[0] for line in lines]
        assert labels == list(INFO_LABELS)

    def test_composite_values(self, info):
        stripped = [strip_ansi(line) for line in build_info_lines(info)]
        assert "OS: macOS 14.2.1 23C71 arm64" in stripped
        assert "Memory: 8192 MiB / 16384 MiB" in stripped
        assert "Load Average: 1.50, 1.25, 1.00" in stripped
        assert "Disk Space: 120.50 GiB / 339.25 GiB" in stripped
        assert "Battery: N/A" in stripped

    def test_single_values(self, info):
        stripped = [strip_ansi(line) for line in build_info_lines(info)]
        assert "GPU: <gpu_model>" in stripped
        assert "Terminal Font: <terminal_font>" in stripped

    def test_hidden_labels(self, info):
        lines = build_info_lines(info, hidden={"Battery", "Terminal Font"})
        stripped = [strip_ansi(line) for line in lines]
        assert len(lines) == 2 + len(INFO_LABELS) - 2
        assert not any(line.startswith("Battery:") for line in stripped)
        assert not any(line.startswith("Terminal Font:") for line in stripped)
        assert any(line.startswith("Terminal:") for line in stripped)


class TestRender:
    def test_line_count(self, info):
        lines = render(info)
        assert len(lines) == max(len(get_art()), 2 + len(INFO_LABELS))

    def test_info_column_aligned(self, info):
        lines = render(info)
        info_lines = build_info_lines(info)
        column = max(len(line) for line in get_art()) + GUTTER
        for line, info_line in zip(lines, info_lines):
            stripped = strip_ansi(line)
            assert stripped[column:] == strip_ansi(info_line)

    def test_rainbow_default(self, info):
        lines = render(info)
        assert lines[0].startswith(Color.BRIGHT_GREEN.value)
        assert lines[16].startswith(Color.BLUE.value)

    def test_flat(self, info):
        lines = render(info, art_style="flat")
        for line in lines[: len(get_art())]:
            assert line.startswith(FLAT_COLOR.value)

    def test_art_visible_width_consistent(self, info):
        lines = render(info, art_style="flat", hidden=INFO_LABELS)
        # Header and separator remain
        assert visible_len(lines[1]) == max(len(line) for line in get_art()) + GUTTER + len(SEPARATOR)

    def test_unknown_style(self, info):
        with pytest.raises(ValueError, match="Unknown art style"):
            render(info, art_style="plaid")
