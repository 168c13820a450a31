import time
import platform

import cpuinfo
import psutil


def get_cpu_info():
    """Returns CPU info using py-cpuinfo."""
    try:
        cpu_info = cpuinfo.get_cpu_info()
        return cpu_info['brand_raw']
    except Exception as e:
        return f"Error: {e}"


def get_cpu_cores_info():
    """Returns physical and logical core counts using psutil."""
    return f"{psutil.cpu_count(logical=False)} physical, {psutil.cpu_count(logical=True)} logical"


def get_ram_info():
    """Returns RAM info using psutil."""
    try:
        ram = psutil.virtual_memory()
        return f"Total: {ram.total / (1024 ** 3):.2f} GB, Available: {ram.available / (1024 ** 3):.2f} GB"
    except Exception as e:
        return f"Error: {e}"


def write_system_info(file):
    """Writes the machine description that accompanies a set of radix sort results."""
    file.write("[System Info]\n")
    file.write(f"CPU: {get_cpu_info()} ({platform.machine()})\n")
    file.write(f"Cores: {get_cpu_cores_info()}\n")
    file.write(f"RAM: {get_ram_info()}\n")


def get_formatted_elapsed_time(start_time):
    elapsed_time = time.time() - start_time
    formatted_time = time.strftime("%H:%M:%S", time.gmtime(elapsed_time))
    return formatted_time
