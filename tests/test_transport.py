import pytest

from oledkit.transport import RecordingTransport, Transport


def test_transport_passes_address_and_bytes_to_sender():
    sent = []
    transport = Transport(lambda address, data: sent.append((address, data)))
    transport.write(0x3C, [0x00, 0xAE])
    assert sent == [(0x3C, b"\x00\xae")]


def test_transport_rejects_address_outside_seven_bits():
    transport = Transport(lambda address, data: None)
    with pytest.raises(ValueError):
        transport.write(0x80, [0x00, 0xAE])


def test_transport_rejects_negative_address():
    transport = Transport(lambda address, data: None)
    with pytest.raises(ValueError):
        transport.write(-1, [0x00])


def test_transport_rejects_empty_payload():
    transport = Transport(lambda address, data: None)
    with pytest.raises(ValueError):
        transport.write(0x3C, b"")


def test_transport_rejects_values_over_a_byte():
    transport = Transport(lambda address, data: None)
    with pytest.raises(ValueError):
        transport.write(0x3C, [0x00, 0x100])


def test_recording_transport_keeps_writes_in_order():
    transport = RecordingTransport()
    transport.write(0x3C, [0x00, 0xAE])
    transport.write(0x3C, [0x40, 0x01, 0x02])
    assert transport.writes == [(0x3C, b"\x00\xae"), (0x3C, b"\x40\x01\x02")]


def test_recording_transport_commands_skip_data_writes():
    transport = RecordingTransport()
    transport.write(0x3C, [0x00, 0xAE])
    transport.write(0x3C, [0x40, 0xFF, 0xFF])
    transport.write(0x3C, [0x00, 0xAF])
    assert transport.commands() == [0xAE, 0xAF]


def test_recording_transport_clear_empties_history():
    transport = RecordingTransport()
    transport.write(0x3C, [0x00, 0xAE])
    transport.clear()
    assert transport.writes == []
    assert transport.commands() == []


def test_recording_transport_validates_like_transport():
    transport = RecordingTransport()
    with pytest.raises(ValueError):
        transport.write(0xFF, [0x00])
    assert transport.writes == []