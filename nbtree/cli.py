"""Interactive menu for exploring the sample tree."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from nbtree.tree import NonBinaryTree, create_tree, larger

MENU = (
    " (1) Traversal PreOrder \n"
    " (2) Traversal InOrder \n"
    " (3) Traversal PostOrder \n"
    " (4) Traversal LevelOrder \n"
    " (5) Print Tree \n"
    " (6) Search node Tree \n"
    " (7) Jumlah Daun/Leaf \n"
    " (8) Mencari level node Tree \n"
    " (9) Kedalaman Tree \n"
    " (10) Membandingkan 2 node Tree \n"
    " (11) Exit \n"
)
PROMPT = " Select Menu (Input With Keyboard): "
SEPARATOR = "======================================================\n"
CONTINUE = "Klik apapun untuk melanjutkan \n"
ASK_NODE = "Masukkan node yang dicari: "
EXIT_CHOICE = 11
_CLEAR = "\033[2J\033[H"


def _spaced(values: list[str]) -> str:
    return "".join(f"{value} " for value in values)


class _Session:
    def __init__(self, tree: NonBinaryTree, input_stream: TextIO, output: TextIO) -> None:
        self.tree = tree
        self.input = input_stream
        self.output = output
        self.handlers = {
            1: self.preorder,
            2: self.inorder,
            3: self.postorder,
            4: self.level_order,
            5: self.print_tree,
            6: self.search,
            7: self.leaves,
            8: self.level,
            9: self.depth,
            10: self.compare,
        }

    def write(self, text: str) -> None:
        self.output.write(text)

    def read_line(self) -> str:
        self.output.flush()
        line = self.input.readline()
        if not line:
            raise EOFError
        return line

    def read_char(self) -> str:
        return self.read_line()[0]

    def clear(self) -> None:
        isatty = getattr(self.output, "isatty", None)
        if isatty is not None and isatty():
            self.write(_CLEAR)

    def pause(self) -> None:
        self.write(CONTINUE)
        self.read_line()

    def report_search(self, value: str) -> None:
        found = "ditemukan" if self.tree.search(value) else "tidak ditemukan"
        self.write(f"Node {value} {found}\n")

    def loop(self) -> None:
        while True:
            self.clear()
            self.write(MENU)
            self.write(PROMPT)
            try:
                choice = int(self.read_line().strip())
            except ValueError:
                continue
            if not 1 <= choice <= EXIT_CHOICE:
                continue
            self.write(SEPARATOR)
            self.clear()
            if choice == EXIT_CHOICE:
                self.write("Exit \n")
                return
            self.handlers[choice]()

    def preorder(self) -> None:
        self.write("Traversal PreOrder: \n")
        self.write(_spaced(self.tree.preorder()) + "\n\n")
        self.pause()

    def inorder(self) -> None:
        self.write("Traversal InOrder\n")
        self.write(_spaced(self.tree.inorder()) + "\n\n")
        self.pause()

    def postorder(self) -> None:
        self.write("Traversal PostOrder\n")
        self.write(_spaced(self.tree.postorder()) + "\n\n")
        self.pause()

    def level_order(self) -> None:
        self.write("Traversal LevelOrder\n")
        self.write(_spaced(self.tree.level_order()) + "\n\n\n")
        self.pause()

    def print_tree(self) -> None:
        self.write("Print Tree: \n")
        self.write(self.tree.describe() + "\n\n")
        self.pause()

    def search(self) -> None:
        self.write("Search node Tree\n")
        self.write(ASK_NODE)
        self.report_search(self.read_char())
        self.write("\n\n")
        self.pause()

    def leaves(self) -> None:
        self.write("Jumlah Daun/Leaf\n")
        self.write(f"Jumlah daun : {self.tree.count_leaves()}\n\n\n")
        self.pause()

    def level(self) -> None:
        self.write("Mencari level node Tree\n")
        self.write(ASK_NODE)
        value = self.read_char()
        if not self.tree.search(value):
            self.write(f"Node {value} tidak ditemukan\n")
            self.pause()
            return
        self.write(f"level : {self.tree.level(value)}\n\n\n")
        self.pause()

    def depth(self) -> None:
        self.write("Kedalaman Tree\n")
        self.write(f"Kedalaman : {self.tree.depth()}\n\n\n")
        self.pause()

    def compare(self) -> None:
        self.write("Search node Tree\n")
        self.write(ASK_NODE)
        first = self.read_char()
        self.report_search(first)
        self.write(ASK_NODE)
        second = self.read_char()
        self.report_search(second)
        self.write(f"Node terbesar: {larger(first, second)}\n")
        self.pause()


def run_menu(tree: NonBinaryTree, input_stream: TextIO, output: TextIO) -> None:
    """Run the menu until the exit choice is made or input runs out."""
    try:
        _Session(tree, input_stream, output).loop()
    except EOFError:
        pass
    output.flush()


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menu on the sample tree."""
    parser = argparse.ArgumentParser(
        prog="nbtree", description="Explore a sample non-binary tree from a menu."
    )
    parser.parse_args(argv)
    run_menu(create_tree(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())