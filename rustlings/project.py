"""Generation of a rust-project.json describing every exercise as a crate."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One crate entry of rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def add_path(self, path: str | os.PathLike) -> None:
        """Add a crate for the path if its extension is ``rs``."""
        text = str(path)
        _, dot, extension = text.partition(".")
        if dot and extension == "rs":
            self.crates.append(Crate(root_module=text))

    def exercises_to_json(self, root: str | os.PathLike = "exercises") -> None:
        """Add a crate for every ``.rs`` file below ``root``."""
        for entry in sorted(Path(root).glob("**/*")):
            self.add_path(entry)

    def get_sysroot_src(self) -> None:
        """Find the standard library sources, from RUST_SRC_PATH or rustc."""
        from_env = os.environ.get("RUST_SRC_PATH")
        if from_env is not None:
            self.sysroot_src = from_env
            return

        output = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True
        ).stdout.decode("utf-8", errors="replace")
        words = output.split()
        toolchain = words[0] if words else output

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = str(Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library")

    def to_json(self) -> str:
        """Serialize the project as compact JSON."""
        return json.dumps(asdict(self), separators=(",", ":"), ensure_ascii=False)

    def write_to_disk(self, path: str | os.PathLike = "rust-project.json") -> None:
        """Write the project file."""
        Path(path).write_text(self.to_json(), encoding="utf-8")