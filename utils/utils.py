import os
import platform
import time

import cpuinfo
import psutil


def get_cpu_info():
    """Returns CPU info using py-cpuinfo."""
    try:
        cpu_info = cpuinfo.get_cpu_info()
        return cpu_info['brand_raw']
    except Exception as e:
        return f"Error: {e}"


def get_ram_info():
    """Returns RAM info using psutil."""
    try:
        ram = psutil.virtual_memory()
        return f"Total: {ram.total / (1024 ** 3):.2f} GB, Available: {ram.available / (1024 ** 3):.2f} GB"
    except Exception as e:
        return f"Error: {e}"


def get_core_info():
    physical_cores = psutil.cpu_count(logical=False)
    logical_cores = psutil.cpu_count(logical=True)
    return f"{physical_cores} physical, {logical_cores} logical"


def write_system_info(output_dir):
    """Writes CPU, core and RAM info to <output_dir>/system_info.txt and returns the path."""
    os.makedirs(output_dir, exist_ok=True)
    file_path = os.path.join(output_dir, "system_info.txt")
    with open(file_path, "w") as f:
        f.write(f"[System Info]\nCPU: {get_cpu_info()}\nCores: {get_core_info()}\n"
                f"RAM: {get_ram_info()}\nPython: {platform.python_version()}\n")
    return file_path


def get_formatted_elapsed_time(start_time):
    elapsed_time = time.time() - start_time
    formatted_time = time.strftime("%H:%M:%S", time.gmtime(elapsed_time))
    return formatted_time
