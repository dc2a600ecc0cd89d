from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

HOOK_KINDS = ("before all", "before each", "after each", "after all")

def _title_path(node) -> List[str]:
    path: List[str] = []
    while node is not None:
        if not getattr(node, "root", False):
            path.insert(0, node.title)
        node = node.parent
    return path

@dataclass(eq=False)
class Hook:
    kind: str
    fn: Callable[[], None]
    parent: Optional["Suite"] = None
    title: str = ""
    err: Optional[BaseException] = None

    def __post_init__(self):
        if self.kind not in HOOK_KINDS:
            raise ValueError(f"Unknown hook kind: {self.kind!r}")
        if not self.title:
            name = getattr(self.fn, "__name__", "")
            self.title = f'"{self.kind}" hook'
            if name and name != "<lambda>":
                self.title += f": {name}"

    def title_path(self) -> List[str]: return _title_path(self)
    def full_title(self) -> str: return " ".join(self.title_path())

@dataclass(eq=False)
class Test:
    __test__ = False
    title: str
    fn: Optional[Callable[[], None]] = None
    parent: Optional["Suite"] = None
    pending: bool = False
    duration_ms: Optional[int] = None
    speed: Optional[str] = None       # fast | medium | slow
    err: Optional[BaseException] = None

    def __post_init__(self):
        if self.fn is None:
            self.pending = True

    def title_path(self) -> List[str]: return _title_path(self)
    def full_title(self) -> str: return " ".join(self.title_path())

@dataclass(eq=False)
class Suite:
    title: str = ""
    parent: Optional["Suite"] = None
    root: bool = False
    suites: List["Suite"] = field(default_factory=list)
    tests: List[Test] = field(default_factory=list)
    hooks: Dict[str, List[Hook]] = field(default_factory=lambda: {k: [] for k in HOOK_KINDS})

    @classmethod
    def create_root(cls, title: str = "") -> "Suite":
        return cls(title=title, root=True)

    # ---------- builders ----------
    def describe(self, title: str) -> "Suite":
        child = Suite(title=title, parent=self)
        self.suites.append(child)
        return child

    def it(self, title: str, fn: Optional[Callable[[], None]] = None) -> Test:
        test = Test(title=title, fn=fn, parent=self)
        self.tests.append(test)
        return test

    def xit(self, title: str, fn: Optional[Callable[[], None]] = None) -> Test:
        test = self.it(title, fn)
        test.pending = True
        return test

    def add_hook(self, kind: str, fn: Callable[[], None], title: str = "") -> Hook:
        hook = Hook(kind=kind, fn=fn, parent=self, title=title)
        self.hooks[kind].append(hook)
        return hook

    def before_all(self, fn, title: str = "") -> Hook: return self.add_hook("before all", fn, title)
    def before_each(self, fn, title: str = "") -> Hook: return self.add_hook("before each", fn, title)
    def after_each(self, fn, title: str = "") -> Hook: return self.add_hook("after each", fn, title)
    def after_all(self, fn, title: str = "") -> Hook: return self.add_hook("after all", fn, title)

    # ---------- queries ----------
    def title_path(self) -> List[str]: return _title_path(self)
    def full_title(self) -> str: return " ".join(self.title_path())

    def total(self) -> int:
        return len(self.tests) + sum(s.total() for s in self.suites)

@dataclass
class Stats:
    passes: int = 0
    pending: int = 0
    failures: int = 0
    failed: List[object] = field(default_factory=list)
    duration_ms: int = 0
