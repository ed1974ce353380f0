import pytest

from ingotkit.text import substr


@pytest.mark.parametrize(
    ("text", "start", "end", "expected"),
    [
        ("SDL2-2.0.12/lib/x86/SDL2.dll", "SDL", "l", "SDL2-2.0.12/"),
        ("SDL2_image-2.0.5/lib/x86/libpng16-16.dll", "SDL", "l", "SDL2_image-2.0.5/"),
        ("'SDL2_image-2.0.5/lib/x86/libpng16-16.dll", "image", "l", "image-2.0.5/"),
        (
            "'SDL2_image-2.0.5/lib/x86/libpng16-16.dll",
            "image",
            ".dll",
            "image-2.0.5/lib/x86/libpng16-16",
        ),
        ("'SDL2_image-2.0.5/lib/x86/libpng16-16.dll", "image", "abc", None),
    ],
)
def test_substr(text, start, end, expected):
    assert substr(text, start, end) == expected


def test_substr_missing_start_gives_none():
    assert substr("SDL2-2.0.12/lib/x86/SDL2.dll", "abc", "l") is None


def test_substr_end_may_match_inside_start():
    # The end marker is searched from where the start marker begins.
    assert substr("xabcx", "abc", "a") == ""


def test_substr_result_begins_with_start():
    result = substr("'SDL2_image-2.0.5/lib/x86/libpng16-16.dll", "lib", ".dll")
    assert result is not None
    assert result.startswith("lib")
    assert ".dll" not in result