"""Unit tests for the compose command."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from mysql_fulltext.cli import cli as root_cli
from mysql_fulltext.commands.compose import cli

MATCH = "MATCH (title,body) AGAINST ('+cat -dog ' IN BOOLEAN MODE)"


class TestComposeCommand:
    def test_prints_relevance_query(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["-t", "articles", "-F", "title,body", "--", "+cat", "-dog"])

        assert result.exit_code == 0
        assert (
            f"SELECT *, {MATCH} AS relevance FROM articles WHERE {MATCH} ORDER BY relevance DESC"
            in result.output
        )

    def test_plus_and_tilde_terms_without_separator(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["-t", "articles", "-F", "title", "+cat", "~dog"])

        assert result.exit_code == 0
        assert "AGAINST ('+cat ~dog ' IN BOOLEAN MODE)" in result.output

    def test_exclude_term_before_separator_rejected(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["-F", "title", "-t", "articles", "+mysql", "-test"])

        assert result.exit_code == 2
        assert "'-test' looks like an option" in result.output
        assert "SELECT" not in result.output

    def test_empty_select_falls_back_to_all_columns(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["-t", "articles", "-F", "title", "-s", ",", "cat"])

        assert result.exit_code == 0
        assert "SELECT *, MATCH (title)" in result.output

    def test_custom_order_and_select(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["-t", "articles", "-F", "title", "-s", "id, title", "--order-by", "title", "--asc"]
            + ["--", "cat"],
        )

        assert result.exit_code == 0
        assert "SELECT id, title FROM articles" in result.output
        assert "ORDER BY title ASC" in result.output
        assert "AS relevance" not in result.output

    def test_phrase_argument(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["-t", "articles", "-F", "title", '~"old news"'])

        assert result.exit_code == 0
        assert "AGAINST ('~\\\"old news\\\" ' IN BOOLEAN MODE)" in result.output

    def test_missing_table(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["-F", "title", "cat"])

        assert result.exit_code == 1
        assert "No table given" in result.output

    def test_missing_fields(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["-t", "articles", "cat"])

        assert result.exit_code == 1
        assert "No search fields given" in result.output

    def test_invalid_terms(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["-t", "articles", "-F", "title", '"unterminated'])

        assert result.exit_code == 1
        assert "Failed to parse search terms" in result.output

    def test_defaults_from_config(self, sample_config: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(root_cli, ["--config", str(sample_config), "compose", "--", "+cat"])

        assert result.exit_code == 0
        assert "SELECT id, title, MATCH (title,body)" in result.output
        assert "FROM articles" in result.output
