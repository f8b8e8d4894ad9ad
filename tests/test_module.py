import pytest

from cwmultitest.module import (
    AcceptingModule,
    AppResponse,
    FailingModule,
    Module,
    ModuleError,
)
from cwmultitest.storage import MemoryStorage


class Empty:
    def __repr__(self):
        return "Empty"


class Addr:
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f'Addr("{self.value}")'


BLOCK = {"height": 12345, "time": 1571797419879305533, "chain_id": "cosmos-testnet-14002"}


def test_failing_module_execute_message():
    module = FailingModule()
    with pytest.raises(ModuleError) as info:
        module.execute(None, MemoryStorage(), None, BLOCK, Addr("sender"), Empty())
    assert str(info.value) == 'Unexpected exec msg Empty from Addr("sender")'


def test_failing_module_query_message():
    module = FailingModule()
    with pytest.raises(ModuleError) as info:
        module.query(None, MemoryStorage(), None, BLOCK, Empty())
    assert str(info.value) == "Unexpected custom query Empty"


def test_failing_module_sudo_message():
    module = FailingModule()
    with pytest.raises(ModuleError) as info:
        module.sudo(None, MemoryStorage(), None, BLOCK, Empty())
    assert str(info.value) == "Unexpected sudo msg Empty"


def test_failing_module_leaves_storage_untouched():
    storage = MemoryStorage()
    with pytest.raises(ModuleError):
        FailingModule().execute(None, storage, None, BLOCK, Addr("sender"), Empty())
    assert len(storage) == 0


def test_accepting_module_execute_returns_default_response():
    result = AcceptingModule().execute(None, MemoryStorage(), None, BLOCK, Addr("sender"), Empty())
    assert result.events == AppResponse().events
    assert result.data == AppResponse().data
    assert result == AppResponse(events=[], data=None)


def test_accepting_module_query_returns_empty_binary():
    assert AcceptingModule().query(None, MemoryStorage(), None, BLOCK, Empty()) == b""


def test_accepting_module_sudo_returns_default_response():
    result = AcceptingModule().sudo(None, MemoryStorage(), None, BLOCK, Empty())
    assert result == AppResponse(events=[], data=None)


def test_app_response_defaults_are_independent():
    first = AppResponse()
    second = AppResponse()
    first.events.append("event")
    assert second.events == []


def test_module_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        Module()


def test_module_subclass_can_define_custom_errors():
    class MyKeeper(Module):
        def execute(self, api, storage, router, block, sender, msg):
            raise ModuleError("bank execute called")

        def query(self, api, storage, querier, block, request):
            raise ModuleError("bank query called")

        def sudo(self, api, storage, router, block, msg):
            raise ModuleError("bank sudo called")

    keeper = MyKeeper()
    with pytest.raises(ModuleError, match="^bank execute called$"):
        keeper.execute(None, MemoryStorage(), None, BLOCK, Addr("sender"), Empty())
    with pytest.raises(ModuleError, match="^bank query called$"):
        keeper.query(None, MemoryStorage(), None, BLOCK, Empty())
    with pytest.raises(ModuleError, match="^bank sudo called$"):
        keeper.sudo(None, MemoryStorage(), None, BLOCK, Empty())