"""Tests for build id derivation."""

import hashlib

import pytest

from buildver_cli.fingerprint import derive_build_id, is_fingerprinted


def _expected(*names: str) -> str:
    sha = hashlib.sha256()
    for name in names:
        sha.update(name.encode("utf-8"))
    return sha.hexdigest()[:16]


class TestIsFingerprinted:
    """Tests for the artifact suffix filter."""

    @pytest.mark.parametrize("name", ["app.js", "assets/app.a1b2c3.css", "x.min.js"])
    def test_scripts_and_styles_count(self, name: str) -> None:
        assert is_fingerprinted(name)

    @pytest.mark.parametrize("name", ["logo.png", "app.js.map", "font.woff2", "manifest.json", "app.mjs"])
    def test_other_assets_are_ignored(self, name: str) -> None:
        assert not is_fingerprinted(name)


class TestDeriveBuildId:
    """Tests for derive_build_id."""

    def test_hashes_sorted_script_and_style_names(self) -> None:
        """Only .js/.css names feed the digest, in sorted order."""
        names = {"app.a1b2c3.js", "app.a1b2c3.css", "logo.png"}
        assert derive_build_id(names) == _expected("app.a1b2c3.css", "app.a1b2c3.js")

    def test_is_independent_of_enumeration_order(self) -> None:
        names = ["b.js", "a.css", "c.js", "z.css"]
        assert derive_build_id(names) == derive_build_id(list(reversed(names)))
        assert derive_build_id(names) == derive_build_id(set(names))

    def test_non_script_assets_do_not_change_id(self) -> None:
        base = derive_build_id(["app.a1b2c3.js", "app.a1b2c3.css"])
        assert derive_build_id(["app.a1b2c3.js", "app.a1b2c3.css", "logo.png"]) == base
        assert derive_build_id(["app.a1b2c3.js", "app.a1b2c3.css", "logo-2.png", "app.js.map"]) == base

    def test_renamed_script_changes_id(self) -> None:
        first = derive_build_id(["app.a1b2c3.js", "app.a1b2c3.css"])
        second = derive_build_id(["app.d4e5f6.js", "app.a1b2c3.css"])
        assert first != second

    def test_empty_set_is_digest_of_nothing(self) -> None:
        empty = hashlib.sha256().hexdigest()[:16]
        assert derive_build_id([]) == empty
        assert derive_build_id(["logo.png"]) == empty

    def test_default_id_is_16_lowercase_hex_chars(self) -> None:
        build_id = derive_build_id(["app.js"])
        assert len(build_id) == 16
        assert build_id == build_id.lower()
        int(build_id, 16)

    def test_length_is_configurable(self) -> None:
        full = hashlib.sha256(b"app.js").hexdigest()
        assert derive_build_id(["app.js"], length=8) == full[:8]
        assert derive_build_id(["app.js"], length=64) == full

    @pytest.mark.parametrize("length", [0, 65, -1])
    def test_rejects_out_of_range_length(self, length: int) -> None:
        with pytest.raises(ValueError, match="between 1 and 64"):
            derive_build_id(["app.js"], length=length)

    def test_duplicate_names_are_collapsed(self) -> None:
        assert derive_build_id(["app.js", "app.js"]) == derive_build_id(["app.js"])


def test_sort_order_follows_utf16_code_units() -> None:
    """Astral-plane names sort before high BMP names, as a JS sort() does."""
    astral = "\U0001F600.js"
    fullwidth = "Ａ.js"
    assert derive_build_id([fullwidth, astral]) == _expected(astral, fullwidth)
