"""Section vocabulary and placeholder text for generated READMEs."""

from __future__ import annotations

DEFAULT_LANGUAGE = "zh"

FULL_SECTIONS: tuple[str, ...] = (
    "intro",
    "features",
    "quickstart",
    "scripts",
    "structure",
    "api",
    "env",
    "stack",
    "license",
)

SECTION_TITLES: dict[str, dict[str, str]] = {
    "zh": {
        "intro": "简介",
        "features": "特性",
        "quickstart": "快速开始",
        "scripts": "运行脚本",
        "structure": "项目结构",
        "api": "API 端点",
        "env": "环境变量",
        "stack": "技术栈",
        "license": "许可",
    },
    "en": {
        "intro": "Introduction",
        "features": "Features",
        "quickstart": "Quick Start",
        "scripts": "Scripts",
        "structure": "Project Structure",
        "api": "API Endpoints",
        "env": "Environment Variables",
        "stack": "Tech Stack",
        "license": "License",
    },
}

# Only the Chinese layout carries a table of contents.
TOC_LANGUAGES: frozenset[str] = frozenset({"zh"})
TOC_TITLES: dict[str, str] = {"zh": "目录", "en": "Table of Contents"}

PLACEHOLDERS: dict[str, dict[str, object]] = {
    "zh": {
        "description": "（在此填写项目简介）",
        "intro": "本项目提供一个 Node.js/Express 示例，集成常见中间件与实践。",
        "features": ["简洁易用", "可扩展的工具系统", "默认只读，手动确认才写入"],
        "scripts": "(无脚本)",
        "routes": "(未检测到路由定义；或许位于其它文件/框架抽象中)",
        "env": "(未检测到环境变量；如使用 MongoDB/JWT，请在 .env 中配置)",
        "env_value": "(请填写你的值)",
        "stack": "(未检测到依赖)",
        "license": "(未指定；如需开源，建议补充 LICENSE 文件。)",
    },
    "en": {
        "description": "(Add a short project description here)",
        "intro": "This project is a Node.js/Express example wired up with common middleware and practices.",
        "features": [
            "Simple and easy to use",
            "Extensible tool system",
            "Read-only by default; writes only after explicit confirmation",
        ],
        "scripts": "(no scripts)",
        "routes": "(No route definitions detected; they may live in other files or framework abstractions)",
        "env": "(No environment variables detected; configure MongoDB/JWT settings in .env if used)",
        "env_value": "(fill in your value)",
        "stack": "(no dependencies detected)",
        "license": "(Not specified; add a LICENSE file if you plan to open-source the project.)",
    },
}

QUICKSTART: dict[str, str] = {
    "zh": (
        "# 1) 安装依赖\n"
        "npm i\n"
        "\n"
        "# 2) 本地运行\n"
        "npm start\n"
        "\n"
        "# 3) 默认访问\n"
        "http://localhost:3000"
    ),
    "en": (
        "# 1) Install dependencies\n"
        "npm i\n"
        "\n"
        "# 2) Run locally\n"
        "npm start\n"
        "\n"
        "# 3) Open in a browser\n"
        "http://localhost:3000"
    ),
}

BASIC_FEATURES_TITLE = "特性"
BASIC_DEFAULT_FEATURE = "简洁易用"


__all__ = [
    "BASIC_DEFAULT_FEATURE",
    "BASIC_FEATURES_TITLE",
    "DEFAULT_LANGUAGE",
    "FULL_SECTIONS",
    "PLACEHOLDERS",
    "QUICKSTART",
    "SECTION_TITLES",
    "TOC_LANGUAGES",
    "TOC_TITLES",
]
