from __future__ import annotations

from pathlib import Path

def main():
    root = Path("demo_drop")
    files = [
        root / "work" / "logs" / "errors" / "app.log",
        root / "work" / "logs" / "access.log",
        root / "work" / "src" / "main.go",
    ]
    for f in files:
        f.parent.mkdir(parents=True, exist_ok=True)
        f.write_text(f"// dummy {f.name}\n", encoding="utf-8")

    manifest = root / "list_of_files.txt"
    manifest.write_text("\n".join(str(f.resolve()) for f in files) + "\n", encoding="utf-8")

    print(f"Created demo manifest at: {manifest.resolve()}")
    print(f"Try: treecopy -l {manifest} -d <out> -r logs")

if __name__ == "__main__":
    main()
