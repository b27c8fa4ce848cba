"""
Pong — build_exe.py
Freezes run.py into a single Pong executable with PyInstaller.
"""

from pathlib import Path
import PyInstaller.__main__

APP_NAME = "Pong"

def build():
    project_root = Path(__file__).parent.resolve()

    args = [
        str(project_root / "run.py"),
        "--name", APP_NAME,
        "--onefile",
        "--windowed",
        f"--paths={project_root}",
        "--clean",
        "-y",
    ]

    print(f"Building {APP_NAME}: {' '.join(args)}")
    PyInstaller.__main__.run(args)
    print(f"\n{APP_NAME} written to {project_root / 'dist'}")

if __name__ == "__main__":
    build()
