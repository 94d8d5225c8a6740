"""
Shared fixtures: a small on-disk web project with CSS-module and i18n imports
"""

from pathlib import Path

import pytest


FORM_SOURCE = """import css from "./styles.css";
import { Button } from "./button.i18n.yaml";
import messages from "./messages.i18n.yaml.d.ts";

export const Form = () => <button className={css.submitBtn}>{Button.label}</button>;
export const Title = () => <h1 className={css["title"]}>{t(messages.greeting)}</h1>;
"""

STYLES_SOURCE = """.title {
}
.submit-btn {
  color: red;
}
"""

BUTTON_SOURCE = """title: Form
label: Submit
"""

MESSAGES_SOURCE = """en:
  greeting: "hi"
"""


@pytest.fixture
def web_project(tmp_path: Path) -> Path:
    """
    Create a project root with src/Form.tsx and the files it imports

    Layout:
        package.json
        src/Form.tsx
        src/styles.css
        src/button.i18n.yaml
        src/messages.i18n.yaml
        src/messages.i18n.yaml.d.ts
    """
    (tmp_path / "package.json").write_text("{}\n", encoding="utf-8")
    src = tmp_path / "src"
    src.mkdir()
    (src / "Form.tsx").write_text(FORM_SOURCE, encoding="utf-8")
    (src / "styles.css").write_text(STYLES_SOURCE, encoding="utf-8")
    (src / "button.i18n.yaml").write_text(BUTTON_SOURCE, encoding="utf-8")
    (src / "messages.i18n.yaml").write_text(MESSAGES_SOURCE, encoding="utf-8")
    (src / "messages.i18n.yaml.d.ts").write_text(
        "declare const messages: { greeting: string };\nexport default messages;\n",
        encoding="utf-8",
    )
    return tmp_path
