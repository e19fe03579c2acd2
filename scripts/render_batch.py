from __future__ import annotations
import argparse, glob, os
from typing import Dict, List, Optional, Tuple

import yaml
from tqdm import tqdm

from drunken_diver.route import DEFAULT_WIDTH, draw
from drunken_diver.sources import iter_file_bytes, sha256_digest


def load_config(path: str) -> Dict:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if "input" not in cfg or "root_dir" not in cfg["input"]:
        raise ValueError(f"{path}: missing input.root_dir")
    if "output" not in cfg or "path" not in cfg["output"]:
        raise ValueError(f"{path}: missing output.path")
    render = cfg.setdefault("render", {})
    render.setdefault("width", DEFAULT_WIDTH)
    render.setdefault("digest", "none")
    if render["digest"] not in ("none", "sha256"):
        raise ValueError(f"unknown digest: {render['digest']}")
    if int(render["width"]) <= 0:
        raise ValueError(f"width must be positive, got {render['width']}")
    cfg["input"].setdefault("pattern", "*")
    return cfg


def list_inputs(root_dir: str, pattern: str) -> List[str]:
    paths = glob.glob(os.path.join(root_dir, pattern))
    return sorted(p for p in paths if os.path.isfile(p))


def render_one(path: str, width: int, digest: str = "none") -> str:
    if digest == "sha256":
        return draw(sha256_digest(bytes(iter_file_bytes(path))), width)
    return draw(iter_file_bytes(path), width)


def render_all(paths: List[str], width: int, digest: str) -> Tuple[List[Tuple[str, str]], List[str]]:
    arts: List[Tuple[str, str]] = []
    skipped: List[str] = []
    for path in tqdm(paths, desc="Rendering", unit="file"):
        try:
            arts.append((path, render_one(path, width, digest)))
        except OSError as e:
            tqdm.write(f"[skip] {path}: {e}")
            skipped.append(path)
    return arts, skipped


def main(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description="Render art for every file in a directory → text file")
    p.add_argument("--config", type=str, default="configs/art.yaml")
    args = p.parse_args(argv)

    cfg = load_config(args.config)
    paths = list_inputs(cfg["input"]["root_dir"], cfg["input"]["pattern"])
    arts, skipped = render_all(paths, int(cfg["render"]["width"]), cfg["render"]["digest"])

    out = cfg["output"]["path"]
    if os.path.dirname(out):
        os.makedirs(os.path.dirname(out), exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        for path, art in arts:
            f.write(f"== {os.path.relpath(path, cfg['input']['root_dir'])}\n{art}\n\n")

    print(f"done: {len(arts)} files → {out}; skipped: {len(skipped)}")


if __name__ == "__main__":
    main()
