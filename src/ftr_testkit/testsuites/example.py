import time
from ..runners.nodes import Suite
from ..runners.runner import expect_equal

def _login(user: str, password: str) -> bool:
    return password == "secret"

def discover() -> Suite:
    root = Suite.create_root()

    login = root.describe("Login")
    session = {}
    login.before_each(lambda: session.clear(), title='"before each" hook: reset session')
    login.it("succeeds", lambda: expect_equal(_login("elastic", "secret"), True))
    login.it("rejects a bad password", lambda: expect_equal(_login("elastic", "nope"), False))
    login.it("remembers the user")

    dashboard = root.describe("Dashboard")
    panels = dashboard.describe("panels")
    panels.it("render within budget", lambda: time.sleep(0.05))
    panels.it("keep their order", lambda: expect_equal(["a", "c", "b"], ["a", "b", "c"]))
    return root
