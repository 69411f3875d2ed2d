from .csv_writer import format_trajectory, write_groups_csv, write_trajectory_csv

__all__ = ['format_trajectory', 'write_groups_csv', 'write_trajectory_csv']
