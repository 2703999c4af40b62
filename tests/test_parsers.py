# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the edge declaration parser."""

import logging

import pytest

from genro_lutree import ImportFormatError, NamedLuTree, load_file, load_lines, parse_line
from genro_lutree.parsers import iter_edges, split_lines


class TestParseLine:
    """Tests for parse_line."""

    def test_parse_line(self):
        """Test a simple declaration."""
        assert parse_line('A->B,C') == ('A', ['B', 'C'])

    def test_single_child(self):
        """Test a declaration with one child."""
        assert parse_line('Root->A') == ('Root', ['A'])

    def test_whitespace_is_literal(self):
        """Test names are not trimmed."""
        assert parse_line(' A -> B, C') == (' A ', [' B', ' C'])

    def test_missing_separator(self):
        """Test a line without '->' fails."""
        with pytest.raises(ImportFormatError, match="missing '->'"):
            parse_line('A,B,C')

    def test_repeated_separator(self):
        """Test a line with two '->' fails."""
        with pytest.raises(ImportFormatError, match="more than one"):
            parse_line('A->B->C')

    def test_no_children(self):
        """Test a line with an empty right-hand side fails."""
        with pytest.raises(ImportFormatError, match="no children"):
            parse_line('A->')

    def test_error_carries_line(self):
        """Test the error keeps the line and its number."""
        with pytest.raises(ImportFormatError) as exc_info:
            parse_line('oops', lineno=7)
        assert exc_info.value.line == 'oops'
        assert exc_info.value.lineno == 7
        assert str(exc_info.value).startswith('line 7:')


class TestIterEdges:
    """Tests for iter_edges."""

    def test_numbers_and_terminators(self):
        """Test one terminator is stripped per line."""
        lines = ['A->B\n', 'B->C,D\r\n', 'D->E']
        assert list(iter_edges(lines)) == [
            (1, 'A', ['B']),
            (2, 'B', ['C', 'D']),
            (3, 'D', ['E']),
        ]

    def test_only_one_terminator_stripped(self):
        """Test a stray carriage return stays in the name."""
        assert list(iter_edges(['A->B\r\r\n'])) == [(1, 'A', ['B\r'])]

    def test_empty_line_fails(self):
        """Test an empty line in the middle of the input is malformed."""
        with pytest.raises(ImportFormatError) as exc_info:
            list(iter_edges(['A->B\n', '\n', 'B->C\n']))
        assert exc_info.value.lineno == 2

    def test_blank_line_with_spaces_fails(self):
        """Test a whitespace-only line is not treated as empty."""
        with pytest.raises(ImportFormatError) as exc_info:
            list(iter_edges(['A->B', '   ']))
        assert exc_info.value.lineno == 2


class TestSplitLines:
    """Tests for split_lines."""

    def test_final_line_feed(self):
        """Test a trailing line feed does not add an empty line."""
        assert split_lines('A->B\nB->C\n') == ['A->B', 'B->C']
        assert split_lines('A->B\nB->C') == ['A->B', 'B->C']

    def test_empty_text(self):
        """Test empty text has no lines."""
        assert split_lines('') == []

    def test_inner_empty_line_kept(self):
        """Test empty lines inside the text are preserved."""
        assert split_lines('A->B\n\nB->C\n') == ['A->B', '', 'B->C']

    @pytest.mark.parametrize('sep', ['\x0b', '\x0c', '\x1c', '\x85', '\u2028', '\u2029'])
    def test_only_line_feed_splits(self, sep):
        """Test other line-breaking characters stay inside lines."""
        assert split_lines(f'A->B{sep}C\n') == [f'A->B{sep}C']


class TestLoadLines:
    """Tests for load_lines and NamedLuTree.from_lines."""

    def test_load_lines(self):
        """Test a tree is built from declarations."""
        tree = load_lines(['A->B,C,D', 'B->E'])
        assert tree.bfs('A') == ['A', 'B', 'C', 'D', 'E']
        assert tree.dfs('A') == ['A', 'D', 'C', 'B', 'E']

    def test_parent_accumulates_across_lines(self):
        """Test a parent on several lines collects all children."""
        tree = NamedLuTree.from_lines(['A->B', 'C->D', 'A->E'])
        assert tree.children('A') == ['B', 'E']
        assert tree.roots() == ['A', 'C']

    def test_duplicates_in_import_are_skipped(self):
        """Test the import does not abort on a repeated child."""
        tree = load_lines(['A->B,C', 'X->B,Y'])
        assert tree.children('X') == ['Y']
        assert len(tree) == 5

    def test_extends_existing_tree(self):
        """Test loading into a given tree."""
        tree = NamedLuTree()
        tree.insert_root_if_absent('Z')
        result = load_lines(['Z->A'], tree=tree)
        assert result is tree
        assert tree.children('Z') == ['A']

    def test_malformed_line_inserts_nothing(self):
        """Test a bad line aborts before any insertion."""
        tree = NamedLuTree()
        with pytest.raises(ImportFormatError) as exc_info:
            load_lines(['A->B', 'B->C', 'broken'], tree=tree)
        assert exc_info.value.lineno == 3
        assert len(tree) == 0

    def test_empty_line_inserts_nothing(self):
        """Test an empty declaration line aborts the import."""
        tree = NamedLuTree()
        with pytest.raises(ImportFormatError):
            load_lines(['A->B', '', 'B->C'], tree=tree)
        assert len(tree) == 0

    def test_lines_logged(self, caplog):
        """Test each imported line is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger='genro_lutree'):
            load_lines(['A->B'])
        assert "Line 1 | Parent: 'A', Children: ['B']" in caplog.text


class TestLoadFile:
    """Tests for load_file and NamedLuTree.from_file."""

    def test_load_file(self, tmp_path):
        """Test reading declarations from a file."""
        path = tmp_path / 'tree.txt'
        path.write_text('Root->A,B\nA->C\n', encoding='utf-8')
        tree = load_file(path)
        assert tree.bfs('Root') == ['Root', 'A', 'B', 'C']

    def test_from_file_str_path(self, tmp_path):
        """Test from_file accepts a string path and non-ASCII names."""
        path = tmp_path / 'tree.txt'
        path.write_text('Wurzel->Äste,Blätter\n', encoding='utf-8')
        tree = NamedLuTree.from_file(str(path))
        assert tree.children('Wurzel') == ['Äste', 'Blätter']

    @pytest.mark.parametrize('sep', ['\x0c', '\u2028'])
    def test_line_breaking_characters_in_names(self, tmp_path, sep):
        """Test names keep form feeds and Unicode line separators."""
        path = tmp_path / 'tree.txt'
        path.write_text(f'A->B{sep}C\n', encoding='utf-8')
        tree = NamedLuTree.from_file(path)
        assert tree.children('A') == [f'B{sep}C']

    def test_crlf_and_lone_cr(self, tmp_path):
        """Test CRLF endings are stripped while a lone CR stays in the name."""
        path = tmp_path / 'tree.txt'
        path.write_bytes(b'A->B\r\nB->C\rD\r\n')
        tree = load_file(path)
        assert tree.children('A') == ['B']
        assert tree.children('B') == ['C\rD']

    def test_empty_line_in_file(self, tmp_path):
        """Test an empty line in a file is reported with its number."""
        path = tmp_path / 'tree.txt'
        path.write_text('A->B\n\nB->C\n', encoding='utf-8')
        with pytest.raises(ImportFormatError) as exc_info:
            load_file(path)
        assert exc_info.value.lineno == 2

    def test_missing_file(self, tmp_path):
        """Test a missing file raises OSError."""
        with pytest.raises(OSError):
            load_file(tmp_path / 'nope.txt')
