# speedwire

Pure-Python building blocks for tools that work with SMA Speedwire
energy meters and inverters. There are no third-party runtime
dependencies.

## What is inside

| Module | Purpose |
| --- | --- |
| `speedwire.ring_buffer` | `RingBuffer`: a fixed-capacity buffer that replaces its oldest element once full |
| `speedwire.measurement_values` | `MeasurementValues`: a ring buffer of timestamped values with lookup, interpolation and statistics |
| `speedwire.line_segment_estimator` | Change-point detection and piecewise constant / linear fits over measurement series |
| `speedwire.byte_encoding` | Read and write big- and little-endian unsigned integers in byte buffers |
| `speedwire.address_conversion` | IPv4/IPv6 checks, net masks, subnet tests and MAC address conversion |
| `speedwire.local_host` | Sleeping, tick counts, epoch time, time differences and hex dumps |
| `speedwire.logger` | `Logger`, `LogLevel` and the `LogListener` interface for routing log output |
| `speedwire.command` | The `Command` codes of the Speedwire inverter protocol and packet id generation |
| `speedwire.authentication` | `UserName`, `Credentials` and `CredentialsMap` for device login credentials |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

### Ring buffers

```python
from speedwire.ring_buffer import RingBuffer

buf = RingBuffer(3)
for value in (1, 2, 3, 4):
    buf.add(value)

list(buf)        # [2, 3, 4] - the oldest element was replaced
buf.oldest()     # 2
buf.newest()     # 4
len(buf)         # 3
```

### Measurement series

```python
from speedwire.measurement_values import MeasurementValues

values = MeasurementValues(100)
for t in range(10):
    values.add_measurement(float(t * 10), t * 1000)

values.find_closest_index(3400)          # index of the sample nearest in time
values.interpolate_closest_values(3500)  # value interpolated between neighbours
values.estimate_mean(0, 9)               # mean over an inclusive index range
mean, variance = values.estimate_mean_and_variance(0, 9)
mean, variance, slope = values.estimate_linear_regression(0, 9)
```

Timestamps are 32-bit millisecond counters; `time_difference` and
`abs_time_difference` handle wrap-around.

### Finding steps in a series

```python
from speedwire.line_segment_estimator import (
    find_change_points_of_mean_values,
    find_piecewise_constant_intervals,
)

change_points = find_change_points_of_mean_values(values)
intervals = find_piecewise_constant_intervals(values)
for interval in intervals:
    print(interval.start_index, interval.end_index, interval.mean_value)
```

`find_piecewise_linear_intervals` does the same with a sloped line
fitted to each interval.

### Byte encoding

```python
from speedwire import byte_encoding

packet = bytearray(8)
byte_encoding.set_uint32_be(packet, 0, 0x534D4100)
byte_encoding.get_uint32_be(packet, 0)   # 0x534D4100
byte_encoding.set_uint16_le(packet, 4, 0x6065)
byte_encoding.get_uint16_le(packet, 4)   # 0x6065
```

### Addresses

```python
from speedwire.address_conversion import (
    is_ipv4, reside_on_same_subnet, to_mac_address, mac_to_string,
)

is_ipv4("192.168.0.10")                                  # True
reside_on_same_subnet("192.168.0.10", "192.168.0.99", 24) # True
mac_to_string(to_mac_address("02:00:00:00:00:01"))
```

### Logging

```python
from speedwire.logger import Logger, LogListener

class PrintListener(LogListener):
    def log_msg(self, msg, level):
        print(level, msg, end="")

Logger.set_log_listener(PrintListener(), level)  # level: a LogLevel mask
log = Logger("receiver")
log.print(level, "received packet\n")
```

### Credentials

```python
from speedwire.authentication import CredentialsMap

credentials = CredentialsMap()
user = CredentialsMap.default_user_name()
credentials.add(user, "password")
credentials.default_credentials()
```

### Packet ids

```python
from speedwire.command import next_packet_id

next_packet_id()   # increments and always has the top bit set
```