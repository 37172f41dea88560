"""Dependency-to-feature mapping."""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

# Checked in order; a row matches when any of its package names is declared.
FEATURE_TABLE: Tuple[Tuple[Tuple[str, ...], Mapping[str, str]], ...] = (
    (("express",), {"zh": "基于 Express 的 Web 服务", "en": "Express-based web service"}),
    (("mongoose",), {"zh": "使用 Mongoose 访问 MongoDB", "en": "MongoDB access via Mongoose"}),
    (("jsonwebtoken",), {"zh": "JWT 鉴权", "en": "JWT auth"}),
    (("bcrypt",), {"zh": "密码哈希（bcrypt）", "en": "Password hashing (bcrypt)"}),
    (("morgan",), {"zh": "HTTP 请求日志（morgan）", "en": "HTTP request logging (morgan)"}),
    (("cookie-parser",), {"zh": "Cookie 解析", "en": "Cookie parsing"}),
    (("body-parser",), {"zh": "请求体解析（body-parser）", "en": "Request body parsing (body-parser)"}),
    (("jade", "pug"), {"zh": "模板引擎 (Jade/Pug)", "en": "Template engine (Jade/Pug)"}),
)


def detect_features(
    dependencies: Optional[Mapping[str, str]], language: str = "zh"
) -> List[str]:
    """Return feature phrases for the known packages declared in ``dependencies``."""
    if not dependencies:
        return []
    features: List[str] = []
    for packages, phrases in FEATURE_TABLE:
        if any(package in dependencies for package in packages):
            features.append(phrases.get(language, phrases["zh"]))
    return features


def merge_features(detected: Sequence[str], extra: Optional[Iterable[str]] = None) -> List[str]:
    """Append ``extra`` to ``detected``, dropping repeats while keeping first-seen order."""
    return list(dict.fromkeys([*detected, *(extra or [])]))


__all__ = ["FEATURE_TABLE", "detect_features", "merge_features"]
