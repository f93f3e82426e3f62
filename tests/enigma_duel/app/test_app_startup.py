from __future__ import annotations

import pytest

from enigma_duel.app import startup as mod
from enigma_duel.app.services import Services
from enigma_duel.config import Settings
from enigma_duel.exceptions.config import InvalidAddressBook
from enigma_duel.features.ledger.abi import EDT_ABI, ENIGMA_DUEL_ABI
from enigma_duel.json_tools.addresses_json import Addresses
from tests._fakes._ledger_fakes import PROXY, TOKEN

# ----------------------------
# Fakes
# ----------------------------

class FakeLogger:
    def __init__(self):
        self.infos = []
        self.exceptions = []

    def info(self, *args):
        self.infos.append(args)

    def exception(self, *args):
        self.exceptions.append(args)


class FakeConnectedGateway:
    def __init__(self, contract_address, abi):
        self.contract_address = contract_address
        self.abi = abi
        self.children = []

    def for_contract(self, contract_address, abi):
        child = FakeConnectedGateway(contract_address, abi)
        self.children.append(child)
        return child


SETTINGS = Settings(
    rpc_url="http://localhost:8545",
    chain_id=31337,
    addresses_path="./data/constants/addresses.json",
    rpc_timeout=10.0,
    tx_timeout=120.0,
    tx_poll_interval=0.01,
)

ADDRESSES = Addresses(
    enigma_duel="0x9fE46736679d2D9a65F0992F2272dE9f3c7fa6e0",
    enigma_duel_state="0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512",
    enigma_duel_token=TOKEN,
    enigma_duel_proxy_admin="0xCf7Ed3AccA5a467e9e704C703E8D87F634fB0Fc9",
    enigma_duel_proxy=PROXY,
)


def _fake_perf_counter(start: float, end: float):
    t = {"n": 0}

    def fake():
        t["n"] += 1
        return start if t["n"] == 1 else end

    return fake


# ----------------------------
# step()
# ----------------------------

def test_step_logs_info_and_returns_result(monkeypatch):
    fake_log = FakeLogger()
    monkeypatch.setattr(mod, "log", fake_log, raising=True)
    monkeypatch.setattr(mod.time, "perf_counter", _fake_perf_counter(1.0, 1.1), raising=True)

    out = mod.step("MyStep", lambda: None)

    assert out is None
    assert len(fake_log.infos) == 1
    fmt, label, ms = fake_log.infos[0]
    assert "✅" in fmt
    assert label == "MyStep"
    assert ms == pytest.approx(100.0)


def test_step_puts_scalar_result_in_label(monkeypatch):
    fake_log = FakeLogger()
    monkeypatch.setattr(mod, "log", fake_log, raising=True)
    monkeypatch.setattr(mod.time, "perf_counter", _fake_perf_counter(10.0, 10.005), raising=True)

    assert mod.step("Load", lambda: 3) == 3

    _, label, ms = fake_log.infos[0]
    assert label == "Load (3)"
    assert ms == pytest.approx(5.0)


def test_step_keeps_label_short_for_objects(monkeypatch):
    fake_log = FakeLogger()
    monkeypatch.setattr(mod, "log", fake_log, raising=True)

    obj = object()
    assert mod.step("Init", lambda: obj) is obj

    _, label, _ = fake_log.infos[0]
    assert label == "Init"


def test_step_uses_provided_logger(monkeypatch):
    fake_log = FakeLogger()
    monkeypatch.setattr(mod.time, "perf_counter", lambda: 0.0, raising=True)

    mod.step("X", lambda: None, logger=fake_log)

    assert len(fake_log.infos) == 1


def test_step_exception_critical_true_reraises(monkeypatch):
    fake_log = FakeLogger()
    monkeypatch.setattr(mod, "log", fake_log, raising=True)
    monkeypatch.setattr(mod.time, "perf_counter", _fake_perf_counter(1.0, 1.2), raising=True)

    def action():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        mod.step("Explode", action, critical=True)

    assert len(fake_log.exceptions) == 1
    fmt, name, ms = fake_log.exceptions[0]
    assert "❌" in fmt
    assert name == "Explode"
    assert ms == pytest.approx(200.0)


def test_step_exception_not_critical_returns_none(monkeypatch):
    fake_log = FakeLogger()
    monkeypatch.setattr(mod, "log", fake_log, raising=True)

    def action():
        raise ValueError("oops")

    assert mod.step("Soft", action, critical=False) is None
    assert len(fake_log.exceptions) == 1
    assert fake_log.infos == []


# ----------------------------
# init_services() / startup()
# ----------------------------

def test_init_services_connects_proxy_and_token(monkeypatch):
    seen = {}

    def fake_connect(settings, contract_address, abi):
        seen["settings"] = settings
        gateway = FakeConnectedGateway(contract_address, abi)
        seen["gateway"] = gateway
        return gateway

    monkeypatch.setattr(mod.LedgerGateway, "connect", staticmethod(fake_connect))

    services = mod.init_services(SETTINGS, ADDRESSES)

    gateway = seen["gateway"]
    assert seen["settings"] is SETTINGS
    assert gateway.contract_address == PROXY
    assert gateway.abi is ENIGMA_DUEL_ABI

    assert isinstance(services, Services)
    assert services.game_room.gateway is gateway
    assert services.treasury.duel is gateway

    token = services.treasury.token
    assert token is gateway.children[0]
    assert token.contract_address == TOKEN
    assert token.abi is EDT_ABI


def test_startup_loads_address_book_then_services(monkeypatch):
    calls = []
    sentinel = object()

    def fake_load(path):
        calls.append(("load", path))
        return ADDRESSES

    def fake_init(settings, addresses):
        calls.append(("init", settings, addresses))
        return sentinel

    monkeypatch.setattr(mod, "load_addresses", fake_load)
    monkeypatch.setattr(mod, "init_services", fake_init)
    monkeypatch.setattr(mod, "log", FakeLogger())

    assert mod.startup(SETTINGS) is sentinel
    assert calls == [("load", SETTINGS.addresses_path), ("init", SETTINGS, ADDRESSES)]


def test_startup_fails_when_address_book_is_invalid(monkeypatch):
    fake_log = FakeLogger()

    def fake_load(path):
        raise InvalidAddressBook(path, "fichier introuvable")

    monkeypatch.setattr(mod, "load_addresses", fake_load)
    monkeypatch.setattr(mod, "log", fake_log)

    with pytest.raises(InvalidAddressBook):
        mod.startup(SETTINGS)

    assert len(fake_log.exceptions) == 1
