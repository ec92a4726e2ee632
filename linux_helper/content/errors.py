"""
linux_helper/content/errors.py
Common Linux error messages, their meaning and the usual fix.
"""

from linux_helper.engine.store import build_store
from linux_helper.models.records import ErrorEntry

ERROR_ROWS = (
    {
        "error": "command not found",
        "meaning": "The command you tried to execute does not exist or is not in your PATH.",
        "causes": (
            "Typo in command name",
            "Program not installed",
            "Program not in PATH",
            "Using wrong shell syntax",
        ),
        "solution": """1. Verify the correct command name:
   which git

2. If command doesn't exist, install it:
   sudo apt install package-name

3. Check if it's in PATH:
   echo $PATH

4. Add to PATH if necessary:
   export PATH=/path/to/binary:$PATH""",
        "example": "bash: gitt: command not found",
    },
    {
        "error": "Permission denied",
        "meaning": "You do not have the required permissions to execute the file or access the resource.",
        "causes": (
            "File is not executable",
            "Insufficient user permissions",
            "Directory permission issue",
            "Sudo required but not used",
        ),
        "solution": """1. Make file executable:
   chmod +x script.sh

2. Check file permissions:
   ls -l file.txt

3. Use sudo if needed:
   sudo command

4. Change ownership if necessary:
   sudo chown user:group file.txt""",
        "example": "bash: ./script.sh: Permission denied",
    },
    {
        "error": "cannot open shared object file",
        "meaning": "A required shared library (.so file) cannot be found by the linker.",
        "causes": (
            "Missing library dependency",
            "Library not in LD_LIBRARY_PATH",
            "Incompatible architecture (32-bit vs 64-bit)",
            "Library compiled for different Linux version",
        ),
        "solution": """1. Find the missing library:
   ldd ./program

2. Install missing dependencies:
   sudo apt install libname-dev

3. Set LD_LIBRARY_PATH temporarily:
   export LD_LIBRARY_PATH=/path/to/lib:$LD_LIBRARY_PATH
   ./program

4. Check library dependencies:
   objdump -p ./program | grep NEEDED""",
        "example": "error while loading shared libraries: libssl.so.1.1: cannot open shared object file",
    },
    {
        "error": "broken package / unmet dependencies",
        "meaning": "A package requires other packages that are not installed or cannot be satisfied.",
        "causes": (
            "Incomplete installation",
            "Repository mismatch",
            "Conflicting package versions",
            "Interrupted package manager",
        ),
        "solution": """1. Fix broken packages (Ubuntu/Debian):
   sudo apt --fix-broken install
   sudo apt autoclean
   sudo apt autoremove

2. For Fedora/RedHat:
   sudo dnf install --best --allowerasing

3. Update package lists:
   sudo apt update
   sudo apt upgrade

4. As last resort, remove and reinstall:
   sudo apt remove package-name
   sudo apt install package-name""",
        "example": "Some packages could not be installed. This may mean that you have requested an impossible situation.",
    },
    {
        "error": "No such file or directory",
        "meaning": "The file or directory you referenced does not exist.",
        "causes": (
            "Typo in file path",
            "File was deleted",
            "Working in wrong directory",
            "Relative vs absolute path confusion",
        ),
        "solution": """1. Verify file exists:
   ls -la /path/to/file

2. Check current directory:
   pwd

3. Find the file:
   find ~ -name "filename"

4. Use absolute path:
   /absolute/path/to/file
   (not ./relative/path)""",
        "example": "No such file or directory: /home/user/nofile.txt",
    },
    {
        "error": "Operation not permitted",
        "meaning": "The operation you attempted is not allowed by the system or file permissions.",
        "causes": (
            "Insufficient permissions for operation",
            "File is in read-only filesystem",
            "Directory has restricted permissions",
            "System restrictions",
        ),
        "solution": """1. Check file permissions:
   ls -ld directory/

2. Fix permissions:
   chmod u+w file.txt

3. Check filesystem status:
   mount | grep -i read-only

4. Use sudo if appropriate:
   sudo command""",
        "example": "Operation not permitted",
    },
    {
        "error": "disk quota exceeded",
        "meaning": "You have exceeded your disk storage limit or inode quota.",
        "causes": (
            "Home directory full",
            "Partition full",
            "Too many files created",
            "Large files in temporary directories",
        ),
        "solution": """1. Check disk usage:
   df -h
   du -sh ~/

2. Find large files:
   du -sh ~/* | sort -rh

3. Clean temporary files:
   rm -rf ~/.cache/*
   rm -rf /tmp/*

4. Remove old logs:
   sudo journalctl --vacuum=1w

5. Check quota:
   quota -s""",
        "example": "disk quota exceeded",
    },
    {
        "error": "connection refused",
        "meaning": "The connection to a server or service was actively refused.",
        "causes": (
            "Service not running",
            "Wrong port number",
            "Firewall blocking connection",
            "Service not listening on interface",
        ),
        "solution": """1. Check if service is running:
   sudo systemctl status service-name

2. Start the service:
   sudo systemctl start service-name

3. Check port is listening:
   sudo netstat -tlnp | grep :port

4. Check firewall:
   sudo iptables -L

5. Verify correct host/port:
   telnet localhost 8080""",
        "example": "Connection refused",
    },
    {
        "error": "Syntax error near unexpected token",
        "meaning": "Your shell script has incorrect syntax that the shell cannot parse.",
        "causes": (
            "Missing or mismatched quotes",
            "Missing colon in if statement",
            "Incorrect bracket nesting",
            "Using wrong shell",
        ),
        "solution": """1. Check script syntax:
   bash -n script.sh

2. Use shellcheck to find errors:
   shellcheck script.sh

3. Common mistakes:
   - if [ $var = "test" ]; then (missing then)
   - echo "text  (missing closing quote)
   - if [ ... ] { (should be ; then)

4. Run with debug mode:
   bash -x script.sh""",
        "example": "script.sh: line 5: syntax error: unexpected end of file",
    },
    {
        "error": "No space left on device",
        "meaning": "The partition is completely full and no more data can be written.",
        "causes": (
            "Partition full (100% usage)",
            "Inode table full",
            "Log files consuming space",
            "Large temporary files",
        ),
        "solution": """1. Check disk usage:
   df -h
   df -i

2. Find and remove large files:
   find / -type f -size +1G 2>/dev/null

3. Clear package cache:
   sudo apt clean

4. Remove log files:
   sudo journalctl --vacuum=10M
   sudo rm -f /var/log/*.log

5. Check /tmp and /var/tmp:
   du -sh /tmp /var/tmp""",
        "example": "No space left on device",
    },
)

ERRORS = build_store(ErrorEntry, ERROR_ROWS, name="errors")

GENERAL_TIPS = (
    (
        "Read the Full Error",
        "Error messages often contain the exact line number and context. "
        "Always read the complete message, not just the first line.",
    ),
    (
        "Check Logs",
        "System logs provide detailed information. Check /var/log/ or use "
        "journalctl for system service logs.",
    ),
    (
        "Verify Permissions",
        "Many errors are permission-related. Use ls -l to check file permissions "
        "and whoami to check current user.",
    ),
    (
        "Search Online",
        "Search the exact error message online. Often others have solved the same "
        "problem and documented the solution.",
    ),
)
