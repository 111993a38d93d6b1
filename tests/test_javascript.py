import io

import pytest

from codesort.analyzers.javascript import read
from codesort.errors import UnexpectedClosingBraceError

BALANCED = r"""
        // called by the server or (most often) in case of any action on a message
        //  (so this is very frequently called on non pings)
        notif.removePing = function(mid, forwardToServer, flash){
            if (!mid) return;
            // we assume here there's at most one notification to a given message
            for (var i=0; i<notifications.length; i++) {
                if (notifications[i].mid==mid) {
                    if (flash) {
                        var $md = $('#messages .message[mid='+mid+']');
                        if ($md.length) {
                            md.goToMessageDiv($md);
                        }
                    }
                    if (forwardToServer) ws.emit("rm_ping", mid);
                    notifications.splice(i, 1);
                    notif.updatePingsList();
                    return;
                }
            }
        }
    """


def _read(code):
    return read(io.StringIO(code))


def test_balanced_function_returns_to_start_depth():
    locs = _read(BALANCED)
    assert "".join(loc.content for loc in locs) == BALANCED
    assert locs[0].start_depth == 0
    assert locs[-1].end_depth == 0
    assert max(loc.end_depth for loc in locs) > 0


def test_comments_are_not_sortable():
    locs = _read(BALANCED)
    assert locs[1].sort_key == ""
    assert not locs[1].is_sortable()
    assert locs[3].starts_with("notif.removePing")


def test_brace_in_single_quoted_string_is_ignored():
    loc = read(["var s = '}';\n"])[0]
    assert loc.start_depth == loc.end_depth
    assert "'}'" in loc.sort_key


def test_brace_in_double_quoted_string_is_ignored():
    loc = read(['var s = "{";\n'])[0]
    assert loc.start_depth == loc.end_depth


def test_brace_in_line_comment_is_ignored():
    loc = read(["foo(); // }\n"])[0]
    assert loc.end_depth == loc.start_depth
    assert loc.sort_key == read(["foo();\n"])[0].sort_key


def test_star_comment_spans_lines():
    locs = read(["/* start\n", "   } still comment */ x;\n", "y;\n"])
    assert locs[0].starts_normal
    assert not locs[1].starts_normal
    assert locs[1].end_depth == locs[1].start_depth
    assert "still" not in locs[1].sort_key
    assert locs[2].starts_normal


def test_unbalanced_input_raises():
    with pytest.raises(UnexpectedClosingBraceError) as info:
        read(["foo(]\n"])
    assert info.value.brace == "]"


def test_can_complete():
    locs = read(["a = 1;\n", "b = [\n", "1,\n", "];\n"])
    assert [loc.can_complete for loc in locs] == [True, True, False, True]


def test_whitespace_ignored_in_sort_key():
    assert read(["a   =  1 ;\n"])[0].sort_key == read(["a = 1;\n"])[0].sort_key