"""
linux_helper/content/terminal.py
Terminal and shell basics.
"""

from linux_helper.engine.store import build_store
from linux_helper.models.records import DetailBlock, GuideSection

TERMINAL_ROWS = (
    {
        "title": "Shells Overview",
        "summary": "Bash, Zsh, Fish and POSIX sh, and how to switch between them.",
        "blocks": (
            DetailBlock(
                "Common Shells",
                text="Bash (Bourne Again Shell): most common shell on Linux. Default on most "
                "distributions. Good for scripting and general use.\n"
                "Zsh: modern shell with advanced features. Popular with developers. Better "
                "autocomplete and themes.\n"
                "Fish: user-friendly shell with great defaults. Excellent for beginners. "
                "Different syntax than Bash/Zsh.\n"
                "sh (POSIX Shell): minimal shell adhering to POSIX standards. Used for system "
                "scripts and portability.",
            ),
            DetailBlock(
                "Check and Change Shell",
                code="# Check current shell\n"
                "echo $SHELL\n\n"
                "# List available shells\n"
                "cat /etc/shells\n\n"
                "# Change shell to bash\n"
                "chsh -s /bin/bash\n\n"
                "# Change shell to zsh\n"
                "chsh -s /bin/zsh\n\n"
                "# Start different shell temporarily\n"
                "zsh\n"
                "bash\n"
                "fish",
            ),
        ),
    },
    {
        "title": "Navigating the Filesystem",
        "summary": "pwd, ls, cd and tree, plus the path shortcuts.",
        "blocks": (
            DetailBlock(
                "Essential Navigation Commands",
                code="# Print current directory\n"
                "pwd\n\n"
                "# List directory contents\n"
                "ls\n"
                "ls -l  # Long format with details\n"
                "ls -la # Include hidden files\n"
                "ls -lh # Human-readable sizes\n\n"
                "# Change directory\n"
                "cd /path/to/directory\n"
                "cd ~   # Go to home directory\n"
                "cd -   # Go to previous directory\n"
                "cd ..  # Go to parent directory\n\n"
                "# Show directory tree\n"
                "tree\n"
                "tree -L 2  # Limit depth to 2 levels",
            ),
            DetailBlock(
                "Useful Navigation Shortcuts",
                text="~  Home directory\n.  Current directory\n..  Parent directory\n/  Root directory",
            ),
        ),
    },
    {
        "title": "Working with Files & Directories",
        "summary": "Create, remove, copy, move and view files.",
        "blocks": (
            DetailBlock(
                "Creating and Removing",
                code="# Create directory\n"
                "mkdir directory_name\n"
                "mkdir -p path/to/nested/directory  # Create parent directories\n\n"
                "# Create file (empty)\n"
                "touch file.txt\n\n"
                "# Remove file\n"
                "rm file.txt\n\n"
                "# Remove directory (empty)\n"
                "rmdir directory_name\n\n"
                "# Remove directory with contents\n"
                "rm -r directory_name\n"
                "rm -rf directory_name  # Force remove",
            ),
            DetailBlock(
                "Copying and Moving",
                code="# Copy file\n"
                "cp source.txt destination.txt\n\n"
                "# Copy directory\n"
                "cp -r source_dir destination_dir\n\n"
                "# Move or rename\n"
                "mv old_name.txt new_name.txt\n"
                "mv file.txt /path/to/destination/\n\n"
                "# Move multiple files\n"
                "mv file1.txt file2.txt file3.txt /destination/",
            ),
            DetailBlock(
                "Viewing File Contents",
                code="# View entire file\n"
                "cat file.txt\n\n"
                "# View with line numbers\n"
                "cat -n file.txt\n\n"
                "# View in pager (paginated)\n"
                "less file.txt\n"
                "more file.txt\n\n"
                "# View first/last lines\n"
                "head file.txt     # First 10 lines\n"
                "head -n 20 file.txt\n"
                "tail file.txt     # Last 10 lines\n"
                "tail -f log.txt   # Follow file changes in real-time",
            ),
        ),
    },
    {
        "title": "File Permissions",
        "summary": "Read, change and take ownership of permissions.",
        "blocks": (
            DetailBlock(
                "Understanding Permissions",
                code="# View permissions\n"
                "ls -l file.txt\n\n"
                "# Output: -rw-r--r-- 1 user group 1234 Jan 1 12:00 file.txt\n"
                "# Breakdown:\n"
                "# -       = type (- = file, d = directory, l = symlink)\n"
                "# rw-     = owner permissions (read, write, execute)\n"
                "# r--     = group permissions\n"
                "# r--     = others permissions\n\n"
                "# Permission values:\n"
                "# r (read)    = 4\n"
                "# w (write)   = 2\n"
                "# x (execute) = 1",
            ),
            DetailBlock(
                "Changing Permissions",
                code="# Symbolic notation\n"
                "chmod u+x file.txt        # Add execute for user\n"
                "chmod g+w file.txt        # Add write for group\n"
                "chmod o-r file.txt        # Remove read for others\n"
                "chmod a+r file.txt        # Add read for all\n\n"
                "# Numeric notation\n"
                "chmod 644 file.txt        # rw-r--r-- (readable by all, writable by owner)\n"
                "chmod 755 script.sh       # rwxr-xr-x (executable script)\n"
                "chmod 600 secret.txt      # rw------- (only owner can access)\n\n"
                "# Recursive for directories\n"
                "chmod -R 755 directory/",
            ),
            DetailBlock(
                "Changing Ownership",
                code="# Change owner\n"
                "sudo chown newuser file.txt\n\n"
                "# Change group\n"
                "sudo chown :newgroup file.txt\n\n"
                "# Change both\n"
                "sudo chown newuser:newgroup file.txt\n\n"
                "# Recursive\n"
                "sudo chown -R user:group directory/",
            ),
        ),
    },
    {
        "title": "Redirects & Pipelines",
        "summary": "Send output to files and chain commands together.",
        "blocks": (
            DetailBlock(
                "Output Redirection",
                code="# Redirect stdout to file (overwrite)\n"
                "command > output.txt\n\n"
                "# Redirect stdout to file (append)\n"
                "command >> output.txt\n\n"
                "# Redirect stderr to file\n"
                "command 2> error.txt\n\n"
                "# Redirect both stdout and stderr\n"
                "command > output.txt 2>&1\n"
                "command &> output.txt\n\n"
                "# Discard output\n"
                "command > /dev/null\n"
                "command 2> /dev/null",
            ),
            DetailBlock(
                "Input Redirection",
                code="# Read input from file\n"
                "command < input.txt\n\n"
                "# Here document (multi-line input)\n"
                "cat << EOF\n"
                "This is line 1\n"
                "This is line 2\n"
                "EOF",
            ),
            DetailBlock(
                "Pipelines",
                code="# Pipe output of one command as input to another\n"
                "ls | grep .txt\n\n"
                "# Multiple pipes\n"
                "cat file.txt | grep pattern | sort | uniq\n\n"
                "# Common pipeline commands\n"
                "cat file.txt | grep 'pattern'       # Filter lines\n"
                "ps aux | grep process_name          # Find process\n"
                "ls -lh | sort -k5 -h               # Sort by file size\n"
                "du -sh * | sort -rh                # Largest directories",
            ),
        ),
    },
    {
        "title": "Advanced Shell Features",
        "summary": "Variables, command substitution, globbing and history.",
        "blocks": (
            DetailBlock(
                "Variables",
                code="# Set variable\n"
                "VARIABLE_NAME='value'\n"
                "MY_PATH=/usr/local/bin\n\n"
                "# Use variable\n"
                "echo $VARIABLE_NAME\n"
                "echo ${VARIABLE_NAME}\n\n"
                "# List all variables\n"
                "env\n\n"
                "# Environment variables (available to all processes)\n"
                "export MY_VAR='value'",
            ),
            DetailBlock(
                "Command Substitution",
                code="# Using backticks (older syntax)\n"
                "echo 'Current date: '`date`\n\n"
                "# Using $() (modern syntax - preferred)\n"
                "echo 'Current date: '$(date)\n\n"
                "# Practical examples\n"
                "CURRENT_DATE=$(date +%Y-%m-%d)\n"
                "DIRECTORY_COUNT=$(ls -1 | wc -l)",
            ),
            DetailBlock(
                "Wildcards and Globbing",
                code="# * matches any characters\n"
                "ls *.txt        # All txt files\n"
                "rm *.log        # Remove all log files\n\n"
                "# ? matches single character\n"
                "ls file?.txt    # file1.txt, fileA.txt, etc\n\n"
                "# [...] matches any character in brackets\n"
                "ls file[1-3].txt    # file1.txt, file2.txt, file3.txt\n"
                "ls file[abc].txt    # filea.txt, fileb.txt, filec.txt\n\n"
                "# [!...] matches characters NOT in brackets\n"
                "ls file[!0].txt     # All except file0.txt",
            ),
            DetailBlock(
                "Command History",
                code="# View history\n"
                "history\n\n"
                "# Run previous command\n"
                "!!\n\n"
                "# Run command from history\n"
                "!number\n\n"
                "# Search history (Ctrl+R in most shells)\n"
                "Ctrl+R\n\n"
                "# Clear history\n"
                "history -c",
            ),
        ),
    },
    {
        "title": "Shell Safety",
        "summary": "Commands to avoid and habits that prevent accidents.",
        "blocks": (
            DetailBlock(
                "Dangerous Commands to Avoid",
                text="rm -rf /  deletes entire system\n"
                "dd if=/dev/random of=/dev/sda  overwrites disk\n"
                "forkbomb  fork bomb that crashes system",
            ),
            DetailBlock(
                "Safe Practices",
                code="# Always test before executing\n"
                "# Use --dry-run if available\n"
                "rsync --dry-run -av source/ dest/\n\n"
                "# Double-check variables in destructive commands\n"
                "rm -i file.txt          # Interactive, ask before delete\n\n"
                "# Use long options for clarity\n"
                "rm --interactive file.txt\n"
                "cp --recursive --verbose source/ dest/\n\n"
                "# Test with a small subset first\n"
                "# Bad: rm -rf /path/to/large/directory\n"
                "# Good: rm -rf /path/to/large/directory/*[1-3]    # test first\n"
                "#       rm -rf /path/to/large/directory/           # then full run",
            ),
            DetailBlock(
                "Useful Safety Tools",
                text="set -e: in shell scripts, exit immediately if any command fails\n"
                "set -u: exit if any variable is undefined\n"
                "shellcheck: lint shell scripts to find bugs and issues",
            ),
        ),
    },
)

TERMINAL = build_store(GuideSection, TERMINAL_ROWS, name="terminal")
