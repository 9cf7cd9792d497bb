import sys
import types

import pytest


# Fixture to replace customtkinter, tkinter.Menu and tkinter.messagebox with
# dummies so GUI components can be instantiated in a headless test environment
@pytest.fixture(autouse=True)
def dummy_gui(monkeypatch):
    dummy = types.ModuleType('customtkinter')

    class DummyVar:
        def __init__(self, value=None):
            self._value = value
        def get(self):
            return self._value
        def set(self, value):
            self._value = value

    class DummyWidget:
        def __init__(self, *a, **kw):
            self.kwargs = kw
            self.destroyed = False
            self.bindings = {}
            self.protocols = {}
            self.grid_kwargs = {}
            self.calls = []
        def pack(self, *a, **kw):
            pass
        def grid(self, *a, **kw):
            self.grid_kwargs = kw
        def grid_propagate(self, *a, **kw):
            pass
        def grid_rowconfigure(self, *a, **kw):
            pass
        def grid_columnconfigure(self, *a, **kw):
            pass
        def tkraise(self, *a, **kw):
            pass
        def bind(self, sequence, func=None, *a, **kw):
            self.bindings[sequence] = func
        def configure(self, *a, **kw):
            self.kwargs.update(kw)
        def destroy(self, *a, **kw):
            self.destroyed = True
        def cget(self, key):
            return self.kwargs.get(key, "")
        def winfo_children(self):
            return []
        def focus_set(self):
            pass

    class DummyTextbox(DummyWidget):
        def __init__(self, *a, **kw):
            super().__init__(*a, **kw)
            self.text = ""
        def insert(self, index, text):
            self.text += text
        def get(self, *a, **kw):
            return self.text

    class DummyCTk(DummyWidget):
        def title(self, *a, **kw):
            pass
        def geometry(self, *a, **kw):
            pass
        def state(self, *a, **kw):
            pass
        def resizable(self, *a, **kw):
            pass
        def protocol(self, name, func=None):
            self.protocols[name] = func
        def transient(self, *a, **kw):
            pass
        def wait_visibility(self, *a, **kw):
            pass
        def grab_set(self, *a, **kw):
            self.calls.append("grab_set")
        def wait_window(self, *a, **kw):
            self.calls.append("wait_window")
        def mainloop(self, *a, **kw):
            pass
        def winfo_screenwidth(self):
            return 1920
        def winfo_screenheight(self):
            return 1080

    class DummyFont:
        def __init__(self, *a, **kw):
            pass

    class DummyImage:
        def __init__(self, *a, **kw):
            self.kwargs = kw
        def configure(self, **kw):
            self.kwargs.update(kw)

    dummy.CTk = DummyCTk # type: ignore[attr-defined]
    dummy.CTkToplevel = DummyCTk # type: ignore[attr-defined]
    dummy.CTkLabel = DummyWidget # type: ignore[attr-defined]
    dummy.CTkEntry = DummyWidget # type: ignore[attr-defined]
    dummy.CTkFrame = DummyWidget # type: ignore[attr-defined]
    dummy.CTkButton = DummyWidget # type: ignore[attr-defined]
    dummy.CTkTextbox = DummyTextbox # type: ignore[attr-defined]
    dummy.CTkFont = DummyFont # type: ignore[attr-defined]
    dummy.CTkImage = DummyImage # type: ignore[attr-defined]
    dummy.StringVar = DummyVar # type: ignore[attr-defined]
    dummy.set_appearance_mode = lambda *a, **kw: None # type: ignore[attr-defined]

    monkeypatch.setitem(sys.modules, 'customtkinter', dummy)

    class DummyMenu:
        def __init__(self, *a, **kw):
            self.commands = {}
            self.cascades = {}
        def add_command(self, label, command=None, **kw):
            self.commands[label] = command
        def add_cascade(self, label, menu=None, **kw):
            self.cascades[label] = menu

    import tkinter
    monkeypatch.setattr(tkinter, 'Menu', DummyMenu)

    mb = types.SimpleNamespace(
        showinfo=lambda *a, **kw: None,
        showwarning=lambda *a, **kw: None,
        showerror=lambda *a, **kw: None,
    )
    monkeypatch.setitem(sys.modules, 'tkinter.messagebox', mb)
    monkeypatch.setattr(tkinter, 'messagebox', mb, raising=False)
    yield


# Records every error notice shown by the login dialog
@pytest.fixture()
def notices(monkeypatch):
    from logisphere.ui import login

    shown = []
    monkeypatch.setattr(
        login,
        'messagebox',
        types.SimpleNamespace(showerror=lambda *a, **kw: shown.append(a)),
    )
    return shown


# Makes the modal dialog "type" credentials instead of blocking.
# ``username=None`` presses Cancel; a rejected login is followed by Cancel.
@pytest.fixture()
def typed_login(monkeypatch):
    from logisphere.ui import login

    def install(username=None, password=None):
        def fake_wait(self):
            if username is None:
                self.cancel()
                return
            self.username_var.set(username)
            self.password_var.set(password)
            self.attempt_login()
            if not self.destroyed:
                self.cancel()

        monkeypatch.setattr(login.LoginDialog, 'wait_window', fake_wait)

    return install
