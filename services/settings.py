# services/settings.py
from __future__ import annotations
import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence

MISSING_MSG = "all parameters (--host, --port, --cache) must be provided"


@dataclass
class Settings:
    host: str
    port: int
    cache: Path
    static_dir: Optional[Path] = None


def build_parser() -> argparse.ArgumentParser:
    # -h es --host (como en la versión original), así que la ayuda va solo con --help
    parser = argparse.ArgumentParser(
        prog="notes-server",
        description="Servidor de notas con caché en un archivo JSON",
        add_help=False,
    )
    parser.add_argument("-h", "--host", help="dirección donde escuchar (env HOST)")
    parser.add_argument("-p", "--port", help="puerto (env PORT)")
    parser.add_argument("-c", "--cache", help="archivo JSON de caché (env NOTES_CACHE)")
    parser.add_argument("--static", help="carpeta de archivos estáticos (env NOTES_STATIC_DIR)")
    parser.add_argument("--help", action="help", help="muestra esta ayuda y sale")
    return parser


def _pick(flag_value: Optional[str], env: Mapping[str, str], key: str) -> str:
    if flag_value:
        return flag_value.strip()
    return (env.get(key) or "").strip()


def parse_settings(argv: Optional[Sequence[str]] = None,
                   env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Lee --host/--port/--cache (con respaldo en variables de entorno).
    Si falta alguno, argparse imprime el error y sale con código 2.
    """
    env = os.environ if env is None else env
    parser = build_parser()
    args = parser.parse_args(argv)

    host = _pick(args.host, env, "HOST")
    port_raw = _pick(args.port, env, "PORT")
    cache = _pick(args.cache, env, "NOTES_CACHE")
    static_dir = _pick(args.static, env, "NOTES_STATIC_DIR")

    if not (host and port_raw and cache):
        parser.error(MISSING_MSG)

    try:
        port = int(port_raw)
    except ValueError:
        parser.error(f"invalid port: {port_raw!r}")
    if not 0 < port < 65536:
        parser.error(f"port out of range: {port}")

    return Settings(
        host=host,
        port=port,
        cache=Path(cache),
        static_dir=Path(static_dir) if static_dir else None,
    )
