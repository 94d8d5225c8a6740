"""
Path resolution tests

Tests import specifier resolution, alias tables and the i18n declaration
redirect.
"""

from pathlib import Path

import pytest

from cssmodjump.config.settings import AppSettings
from cssmodjump.lib.paths import (
    aliasTable_build,
    declarationSource_find,
    importPath_resolve,
    importPath_resolveSync,
    jsonc_loads,
    tsconfigPaths_read,
)


def touch(path: Path, text: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestImportPathResolve:
    """Test specifier -> absolute path"""

    def test_relative(self, tmp_path):
        css = touch(tmp_path / "src" / "app.css")
        assert importPath_resolveSync("./app.css", tmp_path / "src", {}) == str(css.resolve())

    def test_parent_relative(self, tmp_path):
        css = touch(tmp_path / "styles" / "app.css")
        current = tmp_path / "src"
        current.mkdir()
        assert importPath_resolveSync("../styles/app.css", current, {}) == str(css.resolve())

    def test_missing_file(self, tmp_path):
        assert importPath_resolveSync("./gone.css", tmp_path, {}) == ""

    def test_empty_specifier(self, tmp_path):
        assert importPath_resolveSync("", tmp_path, {}) == ""

    def test_absolute(self, tmp_path):
        css = touch(tmp_path / "abs.css")
        assert importPath_resolveSync(str(css), tmp_path / "elsewhere", {}) == str(css.resolve())

    def test_alias(self, tmp_path):
        css = touch(tmp_path / "ui" / "theme" / "button.css")
        aliases = {"@ui": str(tmp_path / "ui")}
        assert importPath_resolveSync("@ui/theme/button.css", tmp_path, aliases) == str(css.resolve())

    def test_alias_needs_path_boundary(self, tmp_path):
        touch(tmp_path / "ui" / "x.css")
        aliases = {"@ui": str(tmp_path / "ui")}
        assert importPath_resolveSync("@uikit/x.css", tmp_path, aliases) == ""

    def test_longest_alias_wins(self, tmp_path):
        short = touch(tmp_path / "short" / "styles" / "a.css")
        long = touch(tmp_path / "long" / "a.css")
        aliases = {"@": str(tmp_path / "short"), "@/styles": str(tmp_path / "long")}
        assert importPath_resolveSync("@/styles/a.css", tmp_path, aliases) == str(long.resolve())
        assert short.exists()

    def test_node_modules_tilde(self, tmp_path):
        css = touch(tmp_path / "node_modules" / "bootstrap" / "scss" / "grid.scss")
        current = tmp_path / "src" / "components"
        current.mkdir(parents=True)
        assert importPath_resolveSync("~bootstrap/scss/grid.scss", current, {}) == str(css.resolve())

    def test_node_modules_bare(self, tmp_path):
        css = touch(tmp_path / "node_modules" / "normalize.css" / "normalize.css")
        result = importPath_resolveSync("normalize.css/normalize.css", tmp_path / "src", {})
        assert result == str(css.resolve())

    def test_declaration_file(self, tmp_path):
        """A generated typing stands in for a missing source"""
        declaration = touch(tmp_path / "labels.i18n.yaml.d.ts")
        assert importPath_resolveSync("./labels.i18n.yaml", tmp_path, {}) == str(declaration.resolve())

    @pytest.mark.asyncio
    async def test_async(self, tmp_path):
        css = touch(tmp_path / "app.css")
        assert await importPath_resolve("./app.css", tmp_path, {}) == str(css.resolve())


class TestDeclarationSource:
    """Test redirect from *.i18n.yaml.d.ts to the YAML source"""

    def test_sibling_exists(self, tmp_path):
        touch(tmp_path / "labels.i18n.yaml")
        declaration = str(touch(tmp_path / "labels.i18n.yaml.d.ts"))
        assert declarationSource_find(declaration) == declaration[: -len(".d.ts")]

    def test_yml_suffix(self, tmp_path):
        touch(tmp_path / "labels.i18n.yml")
        declaration = str(touch(tmp_path / "labels.i18n.yml.d.ts"))
        assert declarationSource_find(declaration) == str(tmp_path / "labels.i18n.yml")

    def test_sibling_missing(self, tmp_path):
        declaration = str(touch(tmp_path / "labels.i18n.yaml.d.ts"))
        assert declarationSource_find(declaration) == declaration

    def test_other_declarations_untouched(self, tmp_path):
        touch(tmp_path / "app.css")
        declaration = str(touch(tmp_path / "app.css.d.ts"))
        assert declarationSource_find(declaration) == declaration

    def test_plain_path(self, tmp_path):
        css = str(touch(tmp_path / "app.css"))
        assert declarationSource_find(css) == css


class TestAliasTable:
    """Test alias sources"""

    TSCONFIG = """{
  // project settings
  "compilerOptions": {
    "baseUrl": "./src",
    "paths": {
      "@/*": ["./*"],
      "@theme": ["theme/index.css"], /* exact alias */
    },
  },
}
"""

    def test_jsonc(self):
        assert jsonc_loads('{"a": "x//y", /* c */ "b": [1,],}') == {"a": "x//y", "b": [1]}

    def test_tsconfig_paths(self, tmp_path):
        touch(tmp_path / "tsconfig.json", self.TSCONFIG)
        aliases = tsconfigPaths_read(tmp_path)
        assert aliases == {
            "@": str((tmp_path / "src").resolve()),
            "@theme": str((tmp_path / "src" / "theme" / "index.css").resolve()),
        }

    def test_jsconfig_paths(self, tmp_path):
        touch(tmp_path / "jsconfig.json", '{"compilerOptions": {"paths": {"~c/*": ["lib/c/*"]}}}')
        assert tsconfigPaths_read(tmp_path) == {"~c": str((tmp_path / "lib" / "c").resolve())}

    def test_broken_tsconfig_is_ignored(self, tmp_path):
        touch(tmp_path / "tsconfig.json", "{ not json")
        assert tsconfigPaths_read(tmp_path) == {}

    def test_no_tsconfig(self, tmp_path):
        assert tsconfigPaths_read(tmp_path) == {}

    def test_user_aliases(self, tmp_path):
        touch(tmp_path / "tsconfig.json", self.TSCONFIG)
        settings = AppSettings(
            path_alias={"@": "${workspaceFolder}/other", "@lib": "lib"},
            use_tsconfig_paths=True,
        )
        aliases = aliasTable_build(settings, tmp_path)

        assert aliases["@"] == str((tmp_path / "other").resolve())
        assert aliases["@lib"] == str((tmp_path / "lib").resolve())
        assert aliases["@theme"] == str((tmp_path / "src" / "theme" / "index.css").resolve())

    def test_tsconfig_disabled(self, tmp_path):
        touch(tmp_path / "tsconfig.json", self.TSCONFIG)
        settings = AppSettings(path_alias={}, use_tsconfig_paths=False)
        assert aliasTable_build(settings, tmp_path) == {}

    def test_exact_alias_resolves_file(self, tmp_path):
        touch(tmp_path / "tsconfig.json", self.TSCONFIG)
        css = touch(tmp_path / "src" / "theme" / "index.css")
        aliases = tsconfigPaths_read(tmp_path)
        assert importPath_resolveSync("@theme", tmp_path, aliases) == str(css.resolve())
