"""Shared pytest fixtures for dump extraction tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from sql_dump_extractor.config import get_settings

USERS_DUMP = "\n".join(
    [
        "-- MySQL dump 10.13  Distrib 8.0.36, for Linux (x86_64)",
        "--",
        "-- Host: localhost    Database: legacy",
        "",
        "DROP TABLE IF EXISTS `users`;",
        "CREATE TABLE `users` (",
        "  `id` int NOT NULL AUTO_INCREMENT,",
        "  `name` varchar(255) DEFAULT NULL,",
        "  `email` varchar(255) NOT NULL,",
        "  PRIMARY KEY (`id`)",
        ") ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;",
        "",
        "LOCK TABLES `users` WRITE;",
        "INSERT INTO `users` (`id`, `name`, `email`) VALUES "
        "(1,'Ann','a@x.com'),(2,'Bo\\'s','b@x.com');",
        "UNLOCK TABLES;",
        "",
        "DROP TABLE IF EXISTS `orders`;",
        "CREATE TABLE `orders` (",
        "  `id` int NOT NULL,",
        "  `user_id` int NOT NULL,",
        "  `amount` decimal(10,2) DEFAULT NULL,",
        "  `note` text,",
        "  PRIMARY KEY (`id`),",
        "  KEY `idx_user` (`user_id`)",
        ") ENGINE=InnoDB;",
        "",
        "INSERT INTO `orders` (`id`, `user_id`, `amount`, `note`) VALUES",
        "(10,1,19.99,'first (gift), wrapped'),",
        "(11,2,NULL,'');",
        "INSERT INTO `orders` (`id`, `user_id`, `amount`, `note`) VALUES "
        "(12,1,-5,'refund');",
        "",
    ]
)


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are lru_cached; drop the cache around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_dump(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing dump text to a temporary .sql file."""

    def _write(text: str, name: str = "dump.sql") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def users_dump(write_dump: Callable[[str], Path]) -> Path:
    """A small mysqldump-style file with `users` and `orders` tables."""
    return write_dump(USERS_DUMP)
