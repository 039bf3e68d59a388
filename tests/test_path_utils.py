from zipshell.path_utils import (
    child_candidate,
    final_segment,
    parent_path,
    split_segments,
    trim_trailing_slash,
)


def test_final_segment():
    assert final_segment("/") == ""
    assert final_segment("/folder1/") == "folder1"
    assert final_segment("/a/b") == "b"


def test_split_segments_drops_empties():
    assert split_segments("//a///b/") == ["a", "b"]
    assert split_segments("/") == []


def test_parent_path():
    assert parent_path("/") == "/"
    assert parent_path("/x/") == "/"
    assert parent_path("/a/b/c/") == "/a/b"
    assert parent_path("/a/b") == "/a"


def test_child_candidate_trims_current_path():
    assert trim_trailing_slash("/folder1/") == "/folder1"
    assert child_candidate("/", "folder1") == "/folder1"
    assert child_candidate("/folder1/", "sub") == "/folder1/sub"
    assert child_candidate("/a", "b") == "/a/b"
