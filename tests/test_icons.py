import pytest

from shellbar.icons import Icons, icon


def test_none_icon_is_empty():
    assert icon(Icons.NONE) == ""


def test_cpu_glyph():
    assert icon(Icons.CPU) == "󰔂"


def test_refresh_and_reboot_share_a_glyph():
    assert icon(Icons.REFRESH) == icon(Icons.REBOOT)
    assert Icons.REFRESH is not Icons.REBOOT


@pytest.mark.parametrize("kind", list(Icons))
def test_str_and_glyph_agree_with_icon(kind):
    assert str(kind) == icon(kind) == kind.glyph


def test_speaker_levels_are_distinct():
    glyphs = {icon(k) for k in (Icons.SPEAKER0, Icons.SPEAKER1, Icons.SPEAKER2, Icons.SPEAKER3)}
    assert len(glyphs) == 4


def test_lookup_by_name():
    assert Icons("Cpu") is Icons.CPU
    assert Icons("MusicNote") is Icons.MUSIC_NOTE


def test_icon_rejects_other_types():
    with pytest.raises(TypeError):
        icon("Cpu")