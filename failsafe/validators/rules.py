"""Rule tables: the detection patterns every scanner evaluates.

This is the encoded heuristic knowledge that makes validation deterministic.
The lists were tuned empirically against AI chat output; extend them by adding
rows, not branches.
"""

from dataclasses import dataclass
import re

from failsafe.validators.base import PatternRule
from failsafe.validators.models import Category, FindingCode, ValidatorConfig


# ──────────────────────────────────────────────────────────────────────
# HALLUCINATION RULES (placeholder, mock or semantically empty content)
# ──────────────────────────────────────────────────────────────────────

HALLUCINATION_RULES: tuple[PatternRule, ...] = (
    PatternRule(
        code=FindingCode.HALLUCINATION_PLACEHOLDER_MARKER,
        category=Category.HALLUCINATION,
        pattern=re.compile(r"\b(?:TODO|FIXME)\b"),
        message="Placeholder marker found: {evidence}. Implementation may be unfinished",
    ),
    PatternRule(
        code=FindingCode.HALLUCINATION_PLACEHOLDER_TEXT,
        category=Category.HALLUCINATION,
        pattern=re.compile(
            r"\blorem\s+ipsum\b"
            r"|\b(?:insert|your)[\s_-]+(?:[\w-]+[\s_-]+){0,3}?here\b",
            re.IGNORECASE,
        ),
        message="Placeholder text found: {evidence}",
    ),
    PatternRule(
        code=FindingCode.HALLUCINATION_MOCK_DATA,
        category=Category.HALLUCINATION,
        # Matches start only at a word boundary so long tokens scan in linear time
        pattern=re.compile(
            r"(?<!\w)\w*?(?:mock|fake|sample[\s_-]?data)\w*"
            r"|\b(?:simulat|emulat)[a-z]*[\s_-]+(?:[a-z]+[\s_-]+){0,2}?(?:responses?|api|environment)\b"
            r"|\btest[a-z]*[\s_-]+(?:[a-z]+[\s_-]+){0,2}?with[\s_-]+(?:[a-z]+[\s_-]+){0,2}?dumm(?:y|ies)\b",
            re.IGNORECASE,
        ),
        message="Mock or sample data found: {evidence}. Real data may be missing",
    ),
    PatternRule(
        code=FindingCode.HALLUCINATION_UNVERIFIED_CLAIM,
        category=Category.HALLUCINATION,
        pattern=re.compile(
            # "I have implemented the feature"
            r"\bI(?:\s+have|'ve|\s+just)?\s+(?:created|implemented|added|fixed|built)"
            r"\s+(?:the|a|an)\s+(?:feature|function|class|method|file|script|tool|module)\b"
            # "implemented successfully"
            r"|\b(?:implemented|created|added|fixed|built|developed)\s+(?:successfully|properly|correctly|fully)\b"
            # "created file at src/x.ts"
            r"|\b(?:created|added|implemented)\s+(?:file|script|class|module)\s+(?:at|in)\s+[\w/.-]+"
            r"|\b(?:now|currently|already)\s+(?:supports|includes|provides|offers)\s+\w+(?:[ \t]+\w+){0,3}"
            # "tested and it works"
            r"|\b(?:tested|verified|validated|confirmed)\s+(?:and|that|it)\s+(?:it\s+)?(?:works|functions|operates)\b"
            r"|\b(?:integrated|connected)\s+(?:with|to|into)\s+\w+(?:[ \t]+\w+){0,2}"
            r"|\b(?:improved|enhanced|optimized|boosted)\s+(?:the\s+)?(?:performance|speed|efficiency)\b"
            r"|\b(?:improved|enhanced|better)\s+(?:user\s+)?(?:experience|interface|ux|ui)\b",
            re.IGNORECASE,
        ),
        message="Unverified implementation claim: {evidence}. Verify it against the actual code",
    ),
    PatternRule(
        code=FindingCode.HALLUCINATION_FILLER_IDENTIFIER,
        category=Category.HALLUCINATION,
        pattern=re.compile(r"\b(?:foo|bar|baz|abc|abcd)\b"),
        message="Filler identifier found: {evidence}. Name carries no meaning",
    ),
    PatternRule(
        code=FindingCode.HALLUCINATION_SUSPICIOUS_NUMBER,
        category=Category.HALLUCINATION,
        pattern=re.compile(r"\b1234\b"),
        message="Suspicious placeholder number found: {evidence}",
    ),
)


# ──────────────────────────────────────────────────────────────────────
# PRIVILEGED MODULES (process spawning, raw filesystem, OS-level APIs)
# ──────────────────────────────────────────────────────────────────────

PRIVILEGED_MODULES: frozenset[str] = frozenset({
    # Node.js
    "child_process",
    "cluster",
    "execa",
    "fs",
    "fs-extra",
    "os",
    "process",
    "shelljs",
    "v8",
    "vm",
    "worker_threads",
    # Python
    "ctypes",
    "multiprocessing",
    "posix",
    "pty",
    "shutil",
    "subprocess",
})


def module_root(module: str) -> str:
    """Reduce 'fs/promises' or 'os.path' to the top-level module name."""
    if module.startswith("@"):
        return module.split("/")[0]
    return module.split("/")[0].split(".")[0]


def _strip_node_prefix(module: str) -> str:
    return module[len("node:"):] if module.startswith("node:") else module


def _is_privileged(module: str, config: ValidatorConfig) -> bool:
    root = module_root(module)
    if root not in PRIVILEGED_MODULES:
        return False
    return root not in config.allowed_modules and module not in config.allowed_modules


def _split_import_list(value: str) -> list[str]:
    """'os as o, subprocess' -> ['os', 'subprocess']"""
    return [name.split()[0] for name in value.split(",") if name.strip()]


# rm flags, each optionally quoted
_QUOTE = r"['\"]?"
_FLAG_GAP = _QUOTE + r"\s+" + _QUOTE
_RECURSIVE_FLAG = r"(?:-[a-z]*r[a-z]*|--recursive)"
_FORCE_FLAG = r"(?:-[a-z]*f[a-z]*|--force)"


# ──────────────────────────────────────────────────────────────────────
# SAFETY RULES (never overridable)
# ──────────────────────────────────────────────────────────────────────

SAFETY_RULES: tuple[PatternRule, ...] = (
    PatternRule(
        code=FindingCode.SAFETY_DESTRUCTIVE_COMMAND,
        category=Category.SAFETY,
        pattern=re.compile(
            r"\brm" + _FLAG_GAP + r"(?:"
            r"-[a-z]*(?:r[a-z]*f|f[a-z]*r)[a-z]*"
            r"|" + _RECURSIVE_FLAG + _FLAG_GAP + _FORCE_FLAG +
            r"|" + _FORCE_FLAG + _FLAG_GAP + _RECURSIVE_FLAG +
            r")\b",
            re.IGNORECASE,
        ),
        message="Destructive command found: {evidence}. Recursive force delete can destroy data",
    ),
    PatternRule(
        code=FindingCode.SAFETY_DISK_FORMAT,
        category=Category.SAFETY,
        pattern=re.compile(
            r"\bformat\s+['\"]?[a-z]:"
            r"|\bmkfs(?:\.\w+)?\s+\S+"
            r"|\bdd\s+[^\n]*?\bof=/dev/(?:sd[a-z]|hd[a-z]|nvme\w*|mmcblk\w*|disk\d*)",
            re.IGNORECASE,
        ),
        message="Disk format or overwrite command found: {evidence}",
    ),
    PatternRule(
        code=FindingCode.SAFETY_HARDCODED_SECRET,
        category=Category.SAFETY,
        # Name starts after a non-name char, so dotted tokens are scanned once
        pattern=re.compile(
            r"(?<![\w$.])(?P<name>[\w$.]*(?:password|passwd|pwd|api[_-]?key|secret|token)[\w$]*)"
            r"['\"]?\s*(?::\s*[\w$.<>\[\]|]+\s*)?(?::=|=(?!=)|:)\s*"
            r"(?P<q>['\"`])(?:(?!(?P=q)).)+(?P=q)",
            re.IGNORECASE,
        ),
        message="Hardcoded credential assigned to {evidence}. Load secrets from configuration instead",
        group="name",
    ),
    PatternRule(
        code=FindingCode.SAFETY_DYNAMIC_EXECUTION,
        category=Category.SAFETY,
        pattern=re.compile(
            r"(?<![\w.$])(?P<call>(?:window|globalThis|global|self)\.eval"
            r"|eval|exec|execSync|execFileSync|spawnSync"
            r"|new\s+Function|os\.system|os\.popen)\s*\("
        ),
        message="Dynamic code execution via {evidence}",
        group="call",
    ),
    PatternRule(
        code=FindingCode.SAFETY_PRIVILEGED_MODULE,
        category=Category.SAFETY,
        pattern=re.compile(
            r"\brequire\s*\(\s*['\"`](?P<require>[^'\"`]+)['\"`]\s*\)"
            r"|\bimport\s+(?:[\w*{}\s,$]+?\s+from\s+)?['\"](?P<esm>[^'\"]+)['\"]"
            r"|\bimport\s*\(\s*['\"](?P<dynamic>[^'\"]+)['\"]\s*\)"
            r"|\b(?:__import__|import_module)\s*\(\s*['\"](?P<pydynamic>[\w.]+)['\"]"
            r"|^[ \t]*from\s+(?P<pyfrom>[\w.]+)\s+import\b"
            r"|^[ \t]*import[ \t]+(?P<pyimport>[\w.]+(?:[ \t]+as[ \t]+\w+)?"
            r"(?:[ \t]*,[ \t]*[\w.]+(?:[ \t]+as[ \t]+\w+)?)*)",
            re.MULTILINE,
        ),
        message="Import of privileged module: {evidence}",
        split=_split_import_list,
        normalize=_strip_node_prefix,
        accept=_is_privileged,
    ),
)


# ──────────────────────────────────────────────────────────────────────
# WARNING RULES (advisory; never affect validity or override)
# ──────────────────────────────────────────────────────────────────────

QUALITY_RULES: tuple[PatternRule, ...] = (
    PatternRule(
        code=FindingCode.PERFORMANCE_INFINITE_LOOP,
        category=Category.PERFORMANCE,
        pattern=re.compile(
            r"\bwhile\s*\(\s*(?:true|1)\s*\)"
            r"|\bfor\s*\(\s*;\s*;\s*\)"
            r"|\bwhile\s+(?:True|1)\s*:"
        ),
        message="Potential infinite loop: {evidence}. Ensure there is a reachable exit",
    ),
    PatternRule(
        code=FindingCode.PERFORMANCE_BLOCKING_CALL,
        category=Category.PERFORMANCE,
        pattern=re.compile(
            r"\b(?P<call>readFileSync|writeFileSync|appendFileSync|readdirSync"
            r"|existsSync|statSync|mkdirSync|rmSync)\s*\("
        ),
        message="Blocking synchronous filesystem call: {evidence}",
        group="call",
    ),
    PatternRule(
        code=FindingCode.QUALITY_SUPPRESSED_CHECK,
        category=Category.QUALITY,
        pattern=re.compile(
            r"@ts-ignore|@ts-nocheck|eslint-disable(?:-next-line|-line)?"
            r"|#\s*type:\s*ignore|#\s*noqa\b"
        ),
        message="Static check suppressed: {evidence}",
    ),
    PatternRule(
        code=FindingCode.QUALITY_EMPTY_HANDLER,
        category=Category.QUALITY,
        pattern=re.compile(
            r"\bcatch\s*(?:\([^)]*\))?\s*\{\s*\}"
            r"|\bexcept\b[^:\n]*:\s*pass\b"
        ),
        message="Error handler swallows exceptions: {evidence}",
    ),
)


# ──────────────────────────────────────────────────────────────────────
# SYNTAX TOKENS
# ──────────────────────────────────────────────────────────────────────

# (open, close, label)
BRACKET_PAIRS: tuple[tuple[str, str, str], ...] = (
    ("{", "}", "braces"),
    ("(", ")", "parentheses"),
    ("[", "]", "square brackets"),
)

# Declaration header: keyword + name + opening brace
CONSTRUCT_HEADER = re.compile(
    r"\b(?P<keyword>function|class|interface|struct|enum|trait|impl|fn|func)\b"
    r"\s*\*?\s*(?P<name>[A-Za-z_$][\w$]*)[^{};]*?\{"
)


# ──────────────────────────────────────────────────────────────────────
# SUGGESTIONS (trigger pattern → remediation text)
# ──────────────────────────────────────────────────────────────────────

# Text longer than this gets the "break it down" suggestion
LARGE_BLOCK_CHARS = 1000


@dataclass(frozen=True)
class SuggestionRule:
    pattern: re.Pattern
    suggestion: str


SUGGESTION_RULES: tuple[SuggestionRule, ...] = (
    SuggestionRule(
        pattern=re.compile(r"\bconsole\.(?:log|debug)\s*\("),
        suggestion="Consider removing console.log statements before committing",
    ),
    SuggestionRule(
        pattern=re.compile(r"\b(?:TODO|FIXME)\b"),
        suggestion="Address TODO/FIXME comments before finalizing",
    ),
    SuggestionRule(
        pattern=re.compile(r"\bdebugger\b"),
        suggestion="Remove debugger statements before committing",
    ),
    SuggestionRule(
        pattern=re.compile(r"\b(?:HACK|XXX)\b"),
        suggestion="Resolve HACK/XXX markers before finalizing",
    ),
    SuggestionRule(
        pattern=re.compile(r"mock", re.IGNORECASE),
        suggestion="Use real data and APIs instead of mock implementations",
    ),
    SuggestionRule(
        pattern=re.compile(rf"\A[\s\S]{{{LARGE_BLOCK_CHARS + 1}}}"),
        suggestion="Consider breaking down large code blocks into smaller, more manageable functions",
    ),
)
