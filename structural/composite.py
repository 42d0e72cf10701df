"""
Composite pattern: files and directories treated uniformly.
"""
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional
from utils.exceptions import PatternError


class FileSystemComponent(ABC):

    def __init__(self, name: str):
        self.name = name
        self.parent: Optional['Directory'] = None

    @property
    @abstractmethod
    def size(self) -> int:
        pass

    @abstractmethod
    def ls(self, depth: int = 0) -> List[str]:
        """Listing lines for this component and everything below it."""
        pass

    @property
    def path(self) -> str:
        if self.parent is None:
            return self.name
        return f"{self.parent.path}/{self.name}"


class File(FileSystemComponent):
    """Leaf."""

    def __init__(self, name: str, size: int):
        super().__init__(name)
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    def ls(self, depth: int = 0) -> List[str]:
        return [f"{'  ' * depth}File: {self.name}, Size: {self.size} bytes"]


class Directory(FileSystemComponent):
    """Composite: its size is the sum of its children."""

    def __init__(self, name: str):
        super().__init__(name)
        self._children: List[FileSystemComponent] = []

    @property
    def children(self) -> List[FileSystemComponent]:
        return list(self._children)

    def __iter__(self) -> Iterator[FileSystemComponent]:
        return iter(self._children)

    def add(self, component: FileSystemComponent) -> FileSystemComponent:
        """Attach a component, detaching it from any previous directory first."""
        node: Optional[FileSystemComponent] = self
        while node is not None:
            if node is component:
                raise PatternError(
                    f"Cannot add '{component.name}' to '{self.name}': it would contain itself",
                    details={'component': component.name, 'directory': self.path}
                )
            node = node.parent

        if component.parent is not None:
            component.parent.remove(component)
        self._children.append(component)
        component.parent = self
        return component

    def remove(self, component: FileSystemComponent):
        if component in self._children:
            self._children.remove(component)
            component.parent = None

    @property
    def size(self) -> int:
        return sum(child.size for child in self._children)

    def ls(self, depth: int = 0) -> List[str]:
        lines = [f"{'  ' * depth}Directory: {self.name}, Size: {self.size} bytes"]
        for child in self._children:
            lines.extend(child.ls(depth + 1))
        return lines


def main():
    root = Directory("Root")
    documents = root.add(Directory("Documents"))
    pictures = root.add(Directory("Pictures"))

    documents.add(File("Document1.txt", 100))
    pictures.add(File("Picture1.jpg", 200))
    pictures.add(File("Picture2.jpg", 300))

    for line in root.ls():
        print(line)


if __name__ == "__main__":
    main()
