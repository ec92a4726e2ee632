"""
linux_helper/content/checklist.py
Non-destructive troubleshooting steps, meant to be followed in order.
"""

from linux_helper.engine.store import build_store
from linux_helper.models.records import ChecklistItem

CHECKLIST_ROWS = (
    {
        "title": "Verify Package Installation",
        "description": "Confirm that the package or application is properly installed on your system.",
        "commands": (
            "which package-name          # Find executable location",
            "command -v package-name     # Check if command exists",
            "apt list --installed | grep package-name  # For Ubuntu/Debian",
            "dnf list installed | grep package-name    # For Fedora",
            "pacman -Q package-name      # For Arch Linux",
        ),
        "notes": "If the package is not found, install it using your distribution's package manager. "
        "If installed but not found, the PATH may need updating.",
    },
    {
        "title": "Check Environment Variables",
        "description": "Verify that important environment variables are set correctly.",
        "commands": (
            "echo $PATH                  # Show command search path",
            "echo $LD_LIBRARY_PATH       # Show library search path",
            "echo $HOME                  # Show home directory",
            "env | sort                  # List all environment variables",
            "env | grep VARIABLE_NAME    # Find specific variable",
        ),
        "notes": "If PATH is missing directories, add them temporarily with: "
        "export PATH=/path/to/bin:$PATH or permanently in ~/.bashrc or ~/.zshrc",
    },
    {
        "title": "Verify File Permissions",
        "description": "Check and fix file permissions that may be preventing access or execution.",
        "commands": (
            "ls -la file.txt             # Check file permissions",
            "ls -ld directory/           # Check directory permissions",
            "chmod +x script.sh          # Make file executable",
            "chmod 644 file.txt          # Read/write for owner, read-only for others",
            "chmod 755 directory/        # Full access for owner, read-execute for others",
        ),
        "notes": "Common issues: missing execute permission on scripts, incorrect ownership, "
        "or wrong group permissions. Use sudo chown if needed.",
    },
    {
        "title": "Restart Terminal or Shell",
        "description": "Restart your shell session to apply changes to configuration files.",
        "commands": (
            "exec bash                   # Restart bash shell",
            "exec zsh                    # Restart zsh shell",
            "source ~/.bashrc            # Reload bashrc without restarting",
            "source ~/.zshrc             # Reload zshrc without restarting",
            "exit                        # Close current shell and restart",
        ),
        "notes": "After modifying ~/.bashrc, ~/.zshrc, or other shell configuration files, "
        "restart your terminal for changes to take effect.",
    },
    {
        "title": "Check System Services",
        "description": "Verify that required services are running and properly configured.",
        "commands": (
            "sudo systemctl status service-name     # Check service status",
            "sudo systemctl start service-name      # Start service",
            "sudo systemctl restart service-name    # Restart service",
            "sudo systemctl enable service-name     # Enable on boot",
            "sudo systemctl list-units --type=service  # List all services",
        ),
        "notes": "Use systemctl for modern systems. For older systems, use: "
        "sudo service service-name status or sudo /etc/init.d/service-name status",
    },
    {
        "title": "Check System Logs",
        "description": "Examine system logs to diagnose problems and understand what went wrong.",
        "commands": (
            "journalctl -xe              # Show recent errors",
            "journalctl -u service-name  # Show logs for specific service",
            "tail -f /var/log/syslog     # Follow system log in real-time",
            "dmesg | tail -20            # Show kernel messages",
            "tail -f /var/log/auth.log   # Monitor authentication logs",
        ),
        "notes": "Check logs when applications fail. journalctl is preferred on modern systems. "
        "Look for ERROR or FAILED messages for clues.",
    },
    {
        "title": "Verify Disk Space",
        "description": "Ensure you have sufficient disk space and inodes available.",
        "commands": (
            "df -h                       # Show disk usage (human-readable)",
            "df -i                       # Show inode usage",
            "du -sh ~/                   # Show home directory size",
            "du -sh ~/* | sort -rh       # Find largest items in home",
            "lsof +D /path               # Find open files in directory",
        ),
        "notes": "If disk is 100% full, clean temporary files, old logs, or package caches. "
        "Use: sudo apt clean, sudo apt autoclean",
    },
    {
        "title": "Check Network Connectivity",
        "description": "Verify network connection if the issue involves internet or local network access.",
        "commands": (
            "ping 8.8.8.8                # Test internet connection",
            "ping google.com             # Test DNS resolution",
            "ip addr show                # Show IP addresses",
            "ifconfig                    # Show network interfaces (older systems)",
            "ss -tlnp                    # Show listening ports",
        ),
        "notes": "For service connections, check if the port is listening: "
        "sudo netstat -tlnp | grep :port or use: sudo ss -tlnp | grep :port",
    },
    {
        "title": "Check Library Dependencies",
        "description": "Verify that all required shared libraries are present and accessible.",
        "commands": (
            "ldd ./program               # Show library dependencies",
            "ldconfig -p | grep libname  # Search for library",
            "LD_LIBRARY_PATH=/path/lib ./program  # Add library path",
            "sudo ldconfig               # Update linker cache",
            "objdump -p ./program | grep NEEDED  # Show program requirements",
        ),
        "notes": 'Missing libraries often show error: "cannot open shared object file". '
        "Use ldd to identify which library is missing, then install it.",
    },
    {
        "title": "Update and Upgrade System",
        "description": "Ensure all packages are up to date, which can fix many compatibility issues.",
        "commands": (
            "sudo apt update && sudo apt upgrade -y  # Ubuntu/Debian",
            "sudo dnf upgrade -y         # Fedora",
            "sudo pacman -Syu            # Arch Linux",
            "sudo apt autoremove         # Remove unused packages",
            "sudo apt autoclean          # Clean package cache",
        ),
        "notes": "Regular updates fix security issues and bugs. Use -y flag to answer yes "
        "automatically. Run these commands regularly for system health.",
    },
)

CHECKLIST = build_store(ChecklistItem, CHECKLIST_ROWS, name="troubleshooting")

# (pattern, ordered steps)
QUICK_REFERENCE = (
    (
        "Application Won't Start",
        (
            "Check if it's installed: which app-name",
            "Check permissions: ls -la /path/to/app",
            "Check dependencies: ldd /path/to/app",
            "Check logs: journalctl -n 50",
        ),
    ),
    (
        "Service Not Responding",
        (
            "Check status: sudo systemctl status service",
            "Check port: sudo ss -tlnp | grep port",
            "Restart service: sudo systemctl restart service",
            "Check logs: journalctl -u service -n 50",
        ),
    ),
    (
        "Permission Issues",
        (
            "Check permissions: ls -la file",
            "Fix permissions: chmod u+x file",
            "Check ownership: ls -l | grep filename",
            "Fix ownership: sudo chown user:group file",
        ),
    ),
    (
        "Disk Space Issue",
        (
            "Check usage: df -h",
            "Find large files: du -sh ~/*",
            "Clean cache: sudo apt clean",
            "Remove old logs: sudo journalctl --vacuum=10M",
        ),
    ),
)

SAFETY_TIPS = (
    (
        "Never Use rm -rf Without Thinking",
        "Test with a small subset first. Example: rm -rf /path/subdir/[a-c]* "
        "before rm -rf /path/subdir/*",
    ),
    (
        "Avoid System Directories",
        "Do not modify files in /sys, /proc, /dev, or /boot unless you know "
        "exactly what you're doing.",
    ),
    (
        "Use sudo Sparingly",
        "Only use sudo when necessary. For package managers, use sudo for "
        "system-wide packages, but not for user-level packages.",
    ),
    (
        "Back Up Before Major Changes",
        "Create a backup before upgrading critical systems or making major "
        "configuration changes.",
    ),
)
