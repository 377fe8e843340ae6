"""Unit tests for CREATE TABLE name discovery."""

import pytest

from sql_dump_extractor.parser.tables import find_table_names


@pytest.mark.unit
class TestFindTableNames:
    def test_distinct_names(self):
        text = "\n".join(
            [
                "CREATE TABLE `users` (",
                "  `id` int",
                ");",
                "CREATE TABLE IF NOT EXISTS `orders` (`id` int);",
                "CREATE TABLE `users` (`id` int);",
            ]
        )
        assert find_table_names(text) == {"users", "orders"}

    def test_lowercase_keywords(self):
        assert find_table_names("create table `logs` (`id` int);") == {"logs"}

    def test_insert_statements_do_not_count(self):
        assert find_table_names("INSERT INTO `users` VALUES (1);") == set()

    def test_empty_text(self):
        assert find_table_names("") == set()
