#!/usr/bin/env python3
"""
Site-wide settings for the documentation generator.

The generator itself is an external tool; this module only describes what it
should do (theme, navigation bar, local search texts, social links, footer)
and can export that description as JSON using the generator's camelCase keys.

Usage (shell):
  python site_config.py                      # print config JSON
  python site_config.py --output config.json
  python site_config.py --sidebar --root .   # materialize the sidebar mapping

Notes:
- The sidebar mapping is switched off (two-column layout, aside on the left).
  load_config(enable_sidebar=True) builds it from SIDEBAR_PATHS.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Dict, List, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from auto_sidebar import DEFAULT_EXCLUDES, NavEntry, build_sidebar


class _GeneratorModel(BaseModel):
    """Frozen model exported with the generator's camelCase key names."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# -- search --
class ButtonTranslations(_GeneratorModel):
    button_text: Optional[str] = None
    button_aria_label: Optional[str] = None


class ModalTranslations(_GeneratorModel):
    no_results_text: Optional[str] = None
    reset_button_text: Optional[str] = None


class SearchTranslations(_GeneratorModel):
    button: Optional[ButtonTranslations] = None
    modal: Optional[ModalTranslations] = None


class SearchLocale(_GeneratorModel):
    translations: SearchTranslations


class LocalSearchOptions(_GeneratorModel):
    locales: Dict[str, SearchLocale] = {}


class SearchConfig(_GeneratorModel):
    provider: Literal["local"] = "local"
    options: Optional[LocalSearchOptions] = None


# -- theme --
class NavItem(_GeneratorModel):
    """Top navigation bar entry: a link, or a dropdown of further entries."""

    text: str
    link: Optional[str] = None
    items: Optional[Tuple[NavItem, ...]] = None

    @model_validator(mode="after")
    def _link_or_items(self) -> NavItem:
        if (self.link is None) == (not self.items):
            raise ValueError(f"nav entry {self.text!r} needs exactly one of 'link' or non-empty 'items'")
        return self


class SocialLink(_GeneratorModel):
    icon: str
    link: str


class Footer(_GeneratorModel):
    message: Optional[str] = None
    copyright: Optional[str] = None


class ThemeConfig(_GeneratorModel):
    outline_title: Optional[str] = None
    # "deep" is the same as (2, 6)
    outline: Union[Literal["deep"], int, Tuple[int, int]] = 2
    logo: Optional[str] = None
    search: Optional[SearchConfig] = None
    nav: Tuple[NavItem, ...] = ()
    sidebar: Union[Literal[False], Dict[str, Tuple[NavEntry, ...]]] = False
    aside: Union[Literal["left"], bool] = True
    social_links: Tuple[SocialLink, ...] = ()
    footer: Optional[Footer] = None

    @field_validator("outline")
    @classmethod
    def _heading_levels(cls, value):
        if value == "deep":
            return value
        low, high = (value, value) if isinstance(value, int) else value
        if not 1 <= low <= high <= 6:
            raise ValueError(f"outline levels must satisfy 1 <= low <= high <= 6, got {value!r}")
        return value


class SiteConfig(_GeneratorModel):
    base: str = "/"
    head: Tuple[Tuple[str, Dict[str, str]], ...] = ()
    title: str
    description: str = ""
    theme_config: ThemeConfig = ThemeConfig()

    @field_validator("base")
    @classmethod
    def _base_slashes(cls, value: str) -> str:
        if not (value.startswith("/") and value.endswith("/")):
            raise ValueError(f"base must start and end with '/', got {value!r}")
        return value


# -- project values --
LOGO = "/img/index/logo.jpg"

# route prefix -> folder read by build_sidebar
SIDEBAR_PATHS: Dict[str, str] = {
    "/front-end/react": "front-end/react",
    "/backend/rabbitmq": "backend/rabbitmq",
}

# three-column layout collapsed to two: no sidebar, aside on the left
SIDEBAR_ENABLED = False

SITE_CONFIG = SiteConfig(
    base="/MyDocs/",
    head=(("link", {"rel": "icon", "type": "image/png", "href": LOGO}),),
    title="Document Management",
    description="A VitePress Site",
    theme_config=ThemeConfig(
        outline_title="目录",
        outline=(2, 6),
        logo=LOGO,
        search=SearchConfig(
            provider="local",
            options=LocalSearchOptions(locales={
                "root": SearchLocale(translations=SearchTranslations(
                    button=ButtonTranslations(button_text="搜索文档", button_aria_label="搜索文档"),
                    modal=ModalTranslations(no_results_text="无法找到相关结果", reset_button_text="清除查询条件"),
                )),
            }),
        ),
        nav=(
            NavItem(text="Home", link="/"),
            NavItem(text="Examples", link="/markdown-examples"),
            NavItem(text="Others", items=(
                NavItem(text="React Examples", link="/front-end/react"),
                NavItem(text="RabbitMQ Examples", link="/backend/rabbitmq"),
            )),
        ),
        sidebar=False,
        aside="left",
        social_links=(SocialLink(icon="github", link="https://github.com/vuejs/vitepress"),),
        footer=Footer(copyright="Copyright © 2025-present AI"),
    ),
)


# -- loading --
def build_sidebar_mapping(
    paths: Mapping[str, str],
    root: Optional[Union[str, Path]] = None,
    excludes=DEFAULT_EXCLUDES,
    fs=None,
) -> Dict[str, Tuple[NavEntry, ...]]:
    """Run build_sidebar once per route, in mapping order."""
    return {
        route: tuple(build_sidebar(folder, root=root, excludes=excludes, fs=fs))
        for route, folder in paths.items()
    }


def load_config(
    root: Optional[Union[str, Path]] = None,
    enable_sidebar: bool = SIDEBAR_ENABLED,
    fs=None,
    paths: Mapping[str, str] = SIDEBAR_PATHS,
    config: SiteConfig = SITE_CONFIG,
) -> SiteConfig:
    """Return the site configuration, with the sidebar mapping built if enabled.

    Filesystem errors from the sidebar build propagate to the caller.
    """
    if not enable_sidebar:
        return config
    sidebar = build_sidebar_mapping(paths, root=root, fs=fs)
    theme = config.theme_config.model_copy(update={"sidebar": sidebar})
    return config.model_copy(update={"theme_config": theme})


def to_generator_dict(config: SiteConfig) -> dict:
    """Config as plain data with camelCase keys; unset optional values are left out."""
    return config.model_dump(mode="json", by_alias=True, exclude_none=True)


def to_json(config: SiteConfig, indent: Optional[int] = 2) -> str:
    return json.dumps(to_generator_dict(config), ensure_ascii=False, indent=indent)


# -- CLI --
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export the documentation site configuration as JSON.")
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Project root the sidebar folders are read from (default: current directory)",
    )
    parser.add_argument(
        "--sidebar",
        action="store_true",
        default=SIDEBAR_ENABLED,
        help="Build the sidebar mapping instead of leaving it disabled",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write JSON to this file instead of stdout",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    try:
        config = load_config(root=args.root, enable_sidebar=args.sidebar)
    except (FileNotFoundError, NotADirectoryError, PermissionError) as exc:
        raise SystemExit(f"Cannot build sidebar: {exc}") from exc

    text = to_json(config)
    if args.output is None:
        print(text)
        return

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(text + "\n", encoding="utf-8")
    print(f"Config written to: {args.output.resolve()}")


if __name__ == "__main__":
    main()
