"""Character, memory, string, number and file-descriptor output helpers."""