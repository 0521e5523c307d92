"""Line-oriented serial port access for plotter controller boards."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Protocol

import serial
from serial.tools import list_ports as _list_ports

EBB_VID = "04D8"  # Microchip vendor id used by the EiBotBoard
EBB_PID = "FD92"  # EiBotBoard product id
DEFAULT_BAUD = 115200

_WIN_DEVICE_PREFIX = "\\\\.\\"
_RETRY_DELAY_S = 0.05


class SerialError(Exception):
    """Raised when a serial port cannot be opened, found or written to."""


@dataclass(frozen=True)
class PortInfo:
    """A serial port found on the system."""

    path: str
    vendor_id: str = ""
    product_id: str = ""
    friendly_name: str = ""


@dataclass
class SerialState:
    """The current connection state of a :class:`SerialController`."""

    is_connected: bool = False
    port_path: str = ""
    baud_rate: int = DEFAULT_BAUD
    last_error: str = ""


class _Port(Protocol):
    def write(self, data: bytes) -> int | None: ...
    def reset_input_buffer(self) -> None: ...
    def reset_output_buffer(self) -> None: ...
    def close(self) -> None: ...


def _normalize_port_path(port_path: str) -> str:
    """On Windows, give plain COM names the device namespace prefix."""
    if sys.platform != "win32" or "://" in port_path:
        return port_path
    if port_path.startswith(_WIN_DEVICE_PREFIX):
        return port_path
    return _WIN_DEVICE_PREFIX + port_path


def _open_pyserial(port_path: str, baud: int) -> _Port:
    port = serial.serial_for_url(
        _normalize_port_path(port_path),
        baudrate=baud,
        bytesize=serial.EIGHTBITS,
        parity=serial.PARITY_NONE,
        stopbits=serial.STOPBITS_ONE,
        xonxoff=False,
        rtscts=False,
        dsrdtr=False,
        timeout=0.2,
        write_timeout=1.0,
        do_not_open=True,
    )
    port.dtr = False
    port.rts = False
    port.open()
    port.reset_input_buffer()
    port.reset_output_buffer()
    return port


def _hex_id(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, int):
        return f"{value:04X}"
    return str(value).upper()


class SerialController:
    """Connects to one serial port and writes CR-terminated ASCII lines.

    ``opener`` opens a port given its path and baud rate; ``lister``
    returns the system's ports as objects with ``device``, ``vid``, ``pid``
    and ``description`` attributes. Both default to pyserial.
    """

    def __init__(
        self,
        opener: Callable[[str, int], _Port] | None = None,
        lister: Callable[[], Iterable[Any]] | None = None,
    ) -> None:
        self._opener = opener or _open_pyserial
        self._lister = lister or _list_ports.comports
        self._port: _Port | None = None
        self.state = SerialState()

    def __enter__(self) -> SerialController:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.disconnect()

    def __del__(self) -> None:
        try:
            self.disconnect()
        except Exception:
            pass

    def connect(self, port_path: str, baud: int = DEFAULT_BAUD) -> None:
        """Open ``port_path`` at ``baud``, closing any previous connection."""
        self.disconnect()
        self.state.last_error = ""
        self.state.baud_rate = baud
        try:
            port = self._opener(port_path, baud)
        except (serial.SerialException, OSError, ValueError) as exc:
            self.state.is_connected = False
            self.state.port_path = ""
            self.state.last_error = f"Failed to open port: {exc}"
            raise SerialError(self.state.last_error) from exc
        self._port = port
        self.state.is_connected = True
        self.state.port_path = port_path

    def disconnect(self) -> None:
        """Close the port if one is open."""
        port, self._port = self._port, None
        if port is not None:
            try:
                port.close()
            except (serial.SerialException, OSError):
                pass
        self.state.is_connected = False
        self.state.port_path = ""

    def is_connected(self) -> bool:
        """Whether a port is currently open."""
        return self.state.is_connected

    def _write_once(self, data: bytes) -> str | None:
        """Write ``data``; return an error description, or None on success."""
        assert self._port is not None
        try:
            written = self._port.write(data)
        except (serial.SerialException, OSError) as exc:
            return str(exc)
        if written is not None and written != len(data):
            return f"wrote {written}/{len(data)} bytes"
        return None

    def write_line(self, ascii_no_cr: str | bytes) -> None:
        """Write one ASCII line followed by a carriage return.

        A failed write is retried once after clearing the port's buffers.
        """
        if not self.state.is_connected or self._port is None:
            self.state.last_error = "Port not connected"
            raise SerialError(self.state.last_error)
        if isinstance(ascii_no_cr, str):
            payload = ascii_no_cr.encode("ascii")
        else:
            payload = bytes(ascii_no_cr)
        data = payload + b"\r"

        first = self._write_once(data)
        if first is None:
            return
        try:
            self._port.reset_input_buffer()
            self._port.reset_output_buffer()
        except (serial.SerialException, OSError):
            pass
        time.sleep(_RETRY_DELAY_S)
        second = self._write_once(data)
        if second is None:
            return
        self.state.last_error = (
            f"Write failed: {first}; retry failed: {second}"
        )
        raise SerialError(self.state.last_error)

    def list_ports(self) -> list[PortInfo]:
        """Enumerate serial ports with their USB vendor and product ids."""
        try:
            found = list(self._lister())
        except (serial.SerialException, OSError) as exc:
            raise SerialError(f"Port enumeration failed: {exc}") from exc
        return [
            PortInfo(
                path=str(getattr(p, "device", "")),
                vendor_id=_hex_id(getattr(p, "vid", None)),
                product_id=_hex_id(getattr(p, "pid", None)),
                friendly_name=str(getattr(p, "description", "") or ""),
            )
            for p in found
        ]

    def auto_connect(self, baud: int = DEFAULT_BAUD) -> str:
        """Connect to the first EiBotBoard found; return its port path."""
        return self.auto_connect_by_vid_pid(EBB_VID, EBB_PID, baud)

    def auto_connect_by_vid_pid(
        self, vendor_id: str, product_id: str, baud: int = DEFAULT_BAUD
    ) -> str:
        """Connect to the first port matching the ids; return its path.

        Ids are hexadecimal strings such as ``"04D8"``.
        """
        vid = vendor_id.upper()
        pid = product_id.upper()
        for info in self.list_ports():
            if info.vendor_id and info.product_id and (
                info.vendor_id == vid and info.product_id == pid
            ):
                self.connect(info.path, baud)
                return info.path
        raise SerialError("No matching device found")