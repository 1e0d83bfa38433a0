from __future__ import annotations

import time

import typer

from models.records import SensorRecord


def render_record(record: SensorRecord) -> None:
    typer.echo(f"Sensor #{record.sensor_id}")
    typer.echo(f"  Temperature: {record.temperature_celsius:.2f}°C")
    typer.echo(f"  Humidity:    {record.humidity_percent:.2f}%")
    typer.echo(f"  Timestamp:   {time.ctime(record.timestamp)}")
