import io

import pytest

from nbtree.cli import main, run_menu
from nbtree.tree import create_tree


def run(text):
    output = io.StringIO()
    run_menu(create_tree(), io.StringIO(text), output)
    return output.getvalue()


def test_exit_choice_ends_session():
    out = run("11\n")
    assert out.endswith("Exit \n")
    assert " (11) Exit \n" in out


def test_preorder_choice():
    tree = create_tree()
    out = run("1\n\n11\n")
    assert "Traversal PreOrder: \n" + " ".join(tree.preorder()) + " \n\n" in out


def test_level_order_choice():
    tree = create_tree()
    out = run("4\n\n11\n")
    assert " ".join(tree.level_order()) + " \n" in out


def test_print_tree_choice():
    out = run("5\n\n11\n")
    assert out.count("--> Index ke-") == create_tree().count_nodes()


def test_search_found_and_missing():
    assert "Node E ditemukan\n" in run("6\nE\n\n11\n")
    assert "Node Z tidak ditemukan\n" in run("6\nZ\n\n11\n")


def test_leaf_count_choice():
    out = run("7\n\n11\n")
    assert f"Jumlah daun : {create_tree().count_leaves()}\n" in out


def test_level_choice():
    assert "level : 0\n" in run("8\nA\n\n11\n")
    out = run("8\nZ\n\n11\n")
    assert "Node Z tidak ditemukan\n" in out
    assert "level :" not in out


def test_depth_choice():
    out = run("9\n\n11\n")
    assert f"Kedalaman : {create_tree().depth()}\n" in out


def test_compare_choice():
    out = run("10\nB\nC\n\n11\n")
    assert "Node B ditemukan\n" in out
    assert "Node C ditemukan\n" in out
    assert "Node terbesar: C\n" in out


def test_main_reads_standard_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n\n11\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert " ".join(create_tree().postorder()) + " " in out
    assert out.endswith("Exit \n")