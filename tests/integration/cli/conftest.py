from pathlib import Path

import pytest

MODULE = """\
---A counter.
---@class Counter
local Counter = {}

---Bump the counter.
---@param by? integer
function Counter:bump(by) self.n = self.n + (by or 1) end

return Counter
"""


@pytest.fixture
def lua_project(tmp_path: Path) -> Path:
    """Creates a small source tree with one good and one broken file."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "counter.lua").write_text(MODULE, encoding="utf-8")
    (root / "broken.lua").write_text("if then\n", encoding="utf-8")
    return root
