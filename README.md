# lehudata

Building blocks for a metric collection service: code-valued enums, record
types for rules and metrics, period arithmetic, named-parameter SQL builders
for statistics tables, and a generator of time-ordered 63-bit ids.

The package has no runtime dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `lehudata.enums.coded` | `CodedEnum` base class and `Status`, `BusinessStatus`, `DefaultShow`, `ShowStatus`, `Phase`, `TypeLevel` |
| `lehudata.enums.base_code` | `BaseCode`, result codes of interface calls |
| `lehudata.enums.code_type` | `CodeType`, data types of metric columns, and `get_code_type_name` |
| `lehudata.enums.records` | message, order, reconciliation, category, id-document, reaction and table-type codes |
| `lehudata.enums.collect` | `CollectType`, `DateType`, `Entity`, `FunctionType`, `MetricCollectType`, `MetricType`, `RuleType` |
| `lehudata.enums.video_dimension` | `VideoDimensionType` |
| `lehudata.entities` | dataclasses `DataSave`, `DimensionGather`, `Metric`, `Rule` |
| `lehudata.timeutil` | day, week, month and year boundaries; `format_time`, `add_days`, `add_weeks`, `now` |
| `lehudata.transfers` | dataclasses passed between collection stages, and `RuleHandleOutput` |
| `lehudata.sqlparams` | column names, WHERE conditions, table names, DELETE/INSERT statements |
| `lehudata.datetimes` | request periods, statistics-time labels, display names, date parsing |
| `lehudata.total` | `TotalParamTransfers`, which assembles named SQL parameters |
| `lehudata.datatype` | metric default values, initial rows, merging stored rows, non-zero filtering |
| `lehudata.gathersql` | `create_gather_sql`, the roll-up query over base metrics |
| `lehudata.idgen` | `Sonyflake`, `decompose`, `GeneratedId`, `IdGenerator` |
| `lehudata.greeter` | `Greeter`, `InMemoryGreeterRepo`, `GreeterUsecase`, `GreeterService` |

## Enums

Every enum member carries an integer code and a message. `from_code` looks a
member up by code; an unknown code falls back to the member whose code is 0,
or to `None` when there is none. `msg_of` returns the message for a code, or
an empty string.

```python
from lehudata.enums.code_type import CodeType
from lehudata.enums.collect import DateType
from lehudata.enums.video_dimension import VideoDimensionType

CodeType.from_code(6).column_type()            # "varchar(256)"
DateType.MONTH.slug()                          # "month"
VideoDimensionType.from_slug("video_type")     # VideoDimensionType.VIDEO_TYPE
```

## Statistics SQL

```python
from lehudata.sqlparams import create_table_name, create_delete_table_data_sql
from lehudata.enums.collect import DateType
from lehudata.enums.video_dimension import VideoDimensionType

table = create_table_name("t_", "watch", VideoDimensionType.VIDEO, DateType.DAY)
# "t_watch_video_stats"
create_delete_table_data_sql(table, VideoDimensionType.VIDEO)
```

`lehudata.gathersql.create_gather_sql` builds the query that sums base metrics
from the daily per-video table, grouped by the requested dimension column.
`lehudata.datatype.disposal_initial_db_data` builds the rows a step will
write, filled with each metric's default value, and `disposal_rel_db_data`
copies stored values into those rows where the dimension id matches.

Missing or unsupported input raises `ValueError`; `get_rel_number_type` and
`get_rel_number_class` raise `TypeError` for non-numeric values.

## Periods

```python
from datetime import datetime
from lehudata.datetimes import create_request_time, create_count_time
from lehudata.enums.collect import DateType

rt = create_request_time(DateType.WEEK, datetime(2024, 5, 15))
create_count_time(DateType.WEEK, rt.start_time, rt.end_time)
# "2024-05-13-2024-05-19"
```

Weeks run from Monday to Sunday; period ends are the last microsecond of the
period.

## Ids

```python
from lehudata.idgen import IdGenerator, decompose

gen = IdGenerator(worker_id=1)
single = gen.generate_single()
batch = gen.generate_batch(10)
decompose(single.id)   # keys: id, msb, time, sequence, machine_id
```

Ids use 39 bits of 10 ms time units since the generator's start time
(2024-01-01 UTC by default), 8 bits of sequence and 16 bits of machine id.
`IdGenerator.parse` reads the time bits against a fixed epoch of 2014-09-01
UTC, so its `timestamp` is measured from that epoch rather than from the
generator's start time.

## Greeter

`GreeterService.say_hello(name)` stores the name through `GreeterUsecase` in an
`InMemoryGreeterRepo` and returns `"Hello " + name`.

## What this package does not do

It provides no network server, no command-line program and no service
registration. It does not connect to a database: the SQL builders return
statement text with named parameters, and storage is limited to the in-memory
greeter repository.