# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for ForestEditor."""

import logging

import pytest

from genro_forest import (
    ForestEditor,
    InvalidIndexError,
    Node,
    NoSelectionError,
)

BASIC = ['0', ('1', ['2', '3']), '4']


class TestEditorBasic:
    """Tests for editor state and selection."""

    def test_create_empty(self):
        """Test a new editor holds the empty forest."""
        editor = ForestEditor()
        assert len(editor) == 0
        assert editor.selected is None
        assert editor.changed is False
        assert editor.root_count == 0
        assert editor.outline() == ''

    def test_create_from_source(self):
        """Test the initial forest can be given as nested data."""
        editor = ForestEditor(BASIC)
        assert editor.forest == Node.from_source(BASIC)
        assert editor.root_count == 3
        assert editor.label_at(3) == '3'
        assert 'size=5' in repr(editor)

    def test_select(self):
        """Test selecting a valid index."""
        editor = ForestEditor(BASIC)
        editor.select(2)
        assert editor.selected == 2
        editor.clear_selection()
        assert editor.selected is None

    def test_select_invalid_raises(self):
        """Test selecting outside the forest raises."""
        editor = ForestEditor(BASIC)
        with pytest.raises(InvalidIndexError):
            editor.select(5)
        assert editor.selected is None

    def test_select_next_previous(self):
        """Test stepping the selection stops at both ends."""
        editor = ForestEditor(['a', 'b'])
        editor.select_next()
        assert editor.selected == 0
        editor.select_next()
        editor.select_next()
        assert editor.selected == 1
        editor.select_previous()
        editor.select_previous()
        assert editor.selected == 0

    def test_select_next_on_empty(self):
        """Test stepping does nothing on an empty forest."""
        editor = ForestEditor()
        editor.select_next()
        editor.select_previous()
        assert editor.selected is None


class TestEditorEdits:
    """Tests for edits through the editor."""

    def test_insert_keeps_selection(self):
        """Test inserting a root shifts the selection to the same item."""
        editor = ForestEditor(BASIC)
        editor.select(2)
        editor.insert('n')
        assert editor.forest.root_labels() == ['n', '0', '1', '4']
        assert editor.selected == 3
        assert editor.label_at(editor.selected) == '2'
        assert editor.changed is True

    def test_insert_without_selection(self):
        """Test inserting with no selection."""
        editor = ForestEditor()
        editor.insert('a')
        assert editor.forest.labels() == ['a']
        assert editor.selected is None

    def test_edit(self):
        """Test editing the selected label."""
        editor = ForestEditor(BASIC)
        editor.select(4)
        editor.edit('four')
        assert editor.label_at(4) == 'four'
        assert editor.selected == 4

    def test_delete_clears_selection(self):
        """Test deleting the selected item."""
        editor = ForestEditor(BASIC)
        editor.select(1)
        editor.delete()
        assert editor.forest.labels() == ['0', '2', '3', '4']
        assert editor.forest.root_count() == 4
        assert editor.selected is None

    def test_selection_follows_moves(self):
        """Test the selection follows the item through structural edits."""
        editor = ForestEditor(BASIC)
        editor.select(2)
        editor.promote()
        assert editor.selected == 3
        assert editor.label_at(3) == '2'
        editor.move_forward()
        assert editor.forest.root_labels() == ['0', '1', '4', '2']
        assert editor.label_at(editor.selected) == '2'
        editor.move_backward()
        editor.demote()
        assert editor.outline() == '0\n1\n├──3\n└──2\n4'
        assert editor.label_at(editor.selected) == '2'

    def test_noop_keeps_index(self):
        """Test a no-op edit keeps the selection."""
        editor = ForestEditor(BASIC)
        editor.select(0)
        editor.demote()
        assert editor.selected == 0
        assert editor.forest == Node.from_source(BASIC)

    @pytest.mark.parametrize('index, action', [
        (0, 'demote'),
        (2, 'demote'),
        (0, 'promote'),
        (4, 'move_forward'),
        (0, 'move_backward'),
    ])
    def test_noop_leaves_changed_unset(self, index, action):
        """Test an edit that leaves the forest as it was is not a change."""
        editor = ForestEditor(BASIC)
        editor.select(index)
        getattr(editor, action)()
        assert editor.changed is False
        assert editor.selected == index

    def test_applied_move_sets_changed(self):
        """Test a structural edit that moves the item marks a change."""
        editor = ForestEditor(BASIC)
        editor.select(4)
        editor.promote()
        assert editor.selected == 0
        assert editor.changed is True

    def test_mark_saved(self):
        """Test mark_saved resets the changed flag."""
        editor = ForestEditor(BASIC)
        editor.insert('n')
        editor.mark_saved()
        assert editor.changed is False

    @pytest.mark.parametrize('action', [
        'edit', 'delete', 'move_forward', 'move_backward', 'promote', 'demote',
    ])
    def test_edit_without_selection_raises(self, action):
        """Test edits needing a selection raise without one."""
        editor = ForestEditor(BASIC)
        args = ('x',) if action == 'edit' else ()
        with pytest.raises(NoSelectionError, match="no item selected"):
            getattr(editor, action)(*args)
        assert editor.changed is False


class TestEditorPermissive:
    """Tests for raise_on_error=False."""

    def test_invalid_select_is_logged(self, caplog):
        """Test an invalid index is logged and ignored."""
        editor = ForestEditor(BASIC, raise_on_error=False)
        editor.select(1)
        with caplog.at_level(logging.WARNING, logger='genro_forest.editor'):
            editor.select(99)
        assert editor.selected == 1
        assert 'Ignoring invalid index' in caplog.text

    def test_non_int_select_is_logged(self, caplog):
        """Test a non-integer index is logged and ignored."""
        editor = ForestEditor(BASIC, raise_on_error=False)
        with caplog.at_level(logging.WARNING, logger='genro_forest.editor'):
            editor.select('1')
        assert editor.selected is None
        assert 'index must be int' in caplog.text

    def test_non_int_select_raises_by_default(self):
        """Test a non-integer index raises TypeError in strict mode."""
        editor = ForestEditor(BASIC)
        with pytest.raises(TypeError):
            editor.select('1')

    def test_missing_selection_is_logged(self, caplog):
        """Test edits without a selection are logged and ignored."""
        editor = ForestEditor(BASIC, raise_on_error=False)
        with caplog.at_level(logging.WARNING, logger='genro_forest.editor'):
            editor.delete()
            editor.promote()
        assert editor.forest == Node.from_source(BASIC)
        assert editor.changed is False
        assert 'Ignoring delete' in caplog.text
        assert 'Ignoring promote' in caplog.text

    def test_edits_logged_at_debug(self, caplog):
        """Test applied edits emit debug records."""
        editor = ForestEditor(BASIC)
        editor.select(4)
        with caplog.at_level(logging.DEBUG, logger='genro_forest.editor'):
            editor.move_backward()
        assert any('move_backward' in r.getMessage() for r in caplog.records)
