"""Application keys for type-safe app configuration access."""

from aiohttp import web

from fsml.config import Config, NavConfig

config_key = web.AppKey("config", Config)
nav_config_key = web.AppKey("nav_config", NavConfig)
