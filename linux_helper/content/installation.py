"""
linux_helper/content/installation.py
Installing Linux packages and developer tools, one accordion section per topic.
"""

from linux_helper.engine.store import build_store
from linux_helper.models.records import DetailBlock, GuideSection

INSTALLATION_ROWS = (
    {
        "title": "System Requirements",
        "summary": "Minimum hardware and the distributions these instructions cover.",
        "blocks": (
            DetailBlock(
                "Minimum Requirements",
                text="• CPU: 1 GHz processor\n"
                "• RAM: 512 MB minimum (2 GB recommended for development)\n"
                "• Storage: 5-20 GB depending on distribution\n"
                "• Internet connection for package downloads",
            ),
            DetailBlock(
                "Supported Distributions",
                text="Debian-based: Ubuntu 20.04, 22.04, 24.04 · Debian 11, 12 · Linux Mint\n"
                "RPM-based: Fedora 39, 40 · CentOS Stream 9 · RHEL 9",
            ),
        ),
    },
    {
        "title": "Installing with APT (Ubuntu/Debian)",
        "summary": "Update package lists and install packages with apt.",
        "blocks": (
            DetailBlock(
                "Update Package Lists",
                text="Before installing any software, always update your package manager's cache:",
                code="sudo apt update\nsudo apt upgrade -y",
            ),
            DetailBlock(
                "Installing Packages",
                text="To install a single package or multiple packages:",
                code="# Install a single package\n"
                "sudo apt install git\n\n"
                "# Install multiple packages\n"
                "sudo apt install build-essential git curl wget vim\n\n"
                "# Install without confirmation\n"
                "sudo apt install -y nodejs npm",
            ),
            DetailBlock(
                "Common Developer Packages",
                code="# Build tools\n"
                "sudo apt install build-essential git curl wget\n\n"
                "# Programming languages\n"
                "sudo apt install python3 python3-pip nodejs npm\n\n"
                "# Development tools\n"
                "sudo apt install vim nano htop tmux",
            ),
            DetailBlock(
                "When to Use sudo",
                text="Use sudo for system-wide installations. For user-level package managers "
                "(pip, npm), avoid sudo to prevent permission issues.",
            ),
        ),
    },
    {
        "title": "Installing with YUM/DNF (Fedora/RedHat)",
        "summary": "Fedora uses DNF (newer) or YUM (older). DNF is recommended.",
        "blocks": (
            DetailBlock(
                "Update Package Manager",
                code="sudo dnf check-update\nsudo dnf upgrade -y",
            ),
            DetailBlock(
                "Installing Packages",
                code="# Install a single package\n"
                "sudo dnf install git\n\n"
                "# Install multiple packages\n"
                "sudo dnf install git curl wget build-essential\n\n"
                "# YUM syntax (for older systems)\n"
                "sudo yum install package-name",
            ),
            DetailBlock(
                "Common Developer Packages",
                code="# Build tools and development essentials\n"
                "sudo dnf install @development-tools git curl\n\n"
                "# Programming languages\n"
                "sudo dnf install python3 python3-pip nodejs npm\n\n"
                "# Utilities\n"
                "sudo dnf install vim nano tmux htop",
            ),
        ),
    },
    {
        "title": "Installing with Pacman (Arch Linux)",
        "summary": "Sync, install and use the AUR on Arch-based systems.",
        "blocks": (
            DetailBlock(
                "Update System",
                text="The -Syu flags mean: -S (sync/install), -y (refresh database), -u (upgrade packages)",
                code="sudo pacman -Syu",
            ),
            DetailBlock(
                "Installing Packages",
                code="# Install a single package\n"
                "sudo pacman -S git\n\n"
                "# Install multiple packages\n"
                "sudo pacman -S base-devel git curl python nodejs npm\n\n"
                "# Remove installation cache\n"
                "sudo pacman -Sc",
            ),
            DetailBlock(
                "Using AUR (Arch User Repository)",
                text="Install yay for easy AUR package management:",
                code="# Install yay\n"
                "sudo pacman -S yay\n\n"
                "# Install from AUR\n"
                "yay -S package-name\n\n"
                "# Update all packages including AUR\n"
                "yay -Syu",
            ),
        ),
    },
    {
        "title": "Installing from Source",
        "summary": "Configure, compile and install when no package exists.",
        "blocks": (
            DetailBlock(
                "When to Compile from Source",
                text="Only compile from source if you need a specific version or custom features. "
                "Pre-built packages are usually safer and faster.",
            ),
            DetailBlock(
                "General Source Installation Steps",
                code="# 1. Download source code\n"
                "cd ~/Downloads\n"
                "wget https://example.com/package-1.0.tar.gz\n\n"
                "# 2. Extract archive\n"
                "tar xzf package-1.0.tar.gz\n"
                "cd package-1.0\n\n"
                "# 3. Read installation instructions\n"
                "cat README\n"
                "cat INSTALL\n\n"
                "# 4. Configure the build\n"
                "./configure\n\n"
                "# 5. Compile\n"
                "make\n\n"
                "# 6. Install (requires sudo for system-wide)\n"
                "sudo make install",
            ),
            DetailBlock(
                "Build Dependencies",
                text="Install build tools first:",
                code="# Ubuntu/Debian\n"
                "sudo apt install build-essential\n\n"
                "# Fedora/RedHat\n"
                "sudo dnf install @development-tools\n\n"
                "# Arch\n"
                "sudo pacman -S base-devel",
            ),
        ),
    },
    {
        "title": "Setting Environment Variables",
        "summary": "PATH, LD_LIBRARY_PATH and HOME, temporarily or permanently.",
        "blocks": (
            DetailBlock(
                "Common Environment Variables",
                text="PATH: directories where the system searches for executable programs\n"
                "LD_LIBRARY_PATH: directories where the linker searches for shared libraries\n"
                "HOME: your user's home directory",
            ),
            DetailBlock(
                "Setting Variables Temporarily",
                code="# View current PATH\n"
                "echo $PATH\n\n"
                "# Add directory to PATH (current session only)\n"
                "export PATH=/usr/local/bin:$PATH\n\n"
                "# Set a new variable\n"
                "export MY_VAR=value",
            ),
            DetailBlock(
                "Setting Variables Permanently",
                text="Edit your shell configuration file:",
                code="# For bash, add to ~/.bashrc\n"
                "echo 'export PATH=/usr/local/bin:$PATH' >> ~/.bashrc\n"
                "source ~/.bashrc\n\n"
                "# For zsh, add to ~/.zshrc\n"
                "echo 'export PATH=/usr/local/bin:$PATH' >> ~/.zshrc\n"
                "source ~/.zshrc",
            ),
        ),
    },
    {
        "title": "Verifying Installation",
        "summary": "Confirm a package is installed, check its version and location.",
        "blocks": (
            DetailBlock(
                "Check if Package is Installed",
                code="# Using 'which' command\n"
                "which git\n\n"
                "# Using 'command' command\n"
                "command -v python3\n\n"
                "# For APT packages (Ubuntu/Debian)\n"
                "apt list --installed | grep git\n\n"
                "# For DNF packages (Fedora)\n"
                "dnf list installed | grep git",
            ),
            DetailBlock(
                "Check Package Version",
                code="# Most packages support --version\n"
                "git --version\n"
                "python3 --version\n"
                "node --version\n"
                "npm --version\n\n"
                "# Some use -v or -V\n"
                "curl -V\n"
                "wget -V",
            ),
            DetailBlock(
                "Verify Package Location",
                code="# Find installed binary\n"
                "which git\n\n"
                "# Find all matching executables\n"
                "whereis git\n\n"
                "# Get detailed package info (Ubuntu)\n"
                "apt show git\n\n"
                "# Get detailed package info (Fedora)\n"
                "dnf info git",
            ),
        ),
    },
    {
        "title": "Understanding Permissions and Sudo",
        "summary": "Read permission strings and run privileged commands safely.",
        "blocks": (
            DetailBlock(
                "Understanding Linux Permissions",
                code="# View file permissions\n"
                "ls -l file.txt\n\n"
                "# Output example: -rw-r--r-- 1 user group 1234 Jan 1 12:00 file.txt\n"
                "# Breakdown:\n"
                "# - = file (d = directory)\n"
                "# rw- = owner (read, write, execute)\n"
                "# r-- = group permissions\n"
                "# r-- = others permissions",
            ),
            DetailBlock(
                "Using sudo Safely",
                code="# Run command with elevated privileges\n"
                "sudo apt install package\n\n"
                "# View sudo privileges\n"
                "sudo -l\n\n"
                "# Edit sudoers file (SAFE WAY)\n"
                "sudo visudo\n\n"
                "# Never edit /etc/sudoers directly!\n"
                "# Always use 'sudo visudo'",
            ),
            DetailBlock(
                "Sudo Best Practices",
                text="• Only use sudo when necessary\n"
                "• Never run entire desktop environments with sudo\n"
                "• Use sudo -u to run as different user when possible\n"
                "• Always verify commands before running with sudo",
            ),
        ),
    },
)

INSTALLATION = build_store(GuideSection, INSTALLATION_ROWS, name="installation")
