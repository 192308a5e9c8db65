from __future__ import annotations

from bfvm.main import entrypoint

if __name__ == "__main__":
    entrypoint()
