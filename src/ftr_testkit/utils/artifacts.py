import pathlib

def junit_report_path(root_directory: str, report_name: str) -> pathlib.Path:
    p = pathlib.Path(root_directory) / 'target' / 'junit'
    p.mkdir(parents=True, exist_ok=True)
    return p / f'TEST-{report_name}.xml'
