"""Pie chart specifications for the frps dashboard.

The builders in this package turn raw server statistics into declarative
ChartSpec objects; `render` encodes them for the ECharts front-end.
"""
