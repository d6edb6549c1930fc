"""
End-to-end tests for REMOVE_EVENT_LISTENER on JavaScript/JSX components.
"""

# =========================================================================
# Valid components
# =========================================================================

class TestValid:
    def test_balanced_component(self, lint):
        code = """
          const handleClack = () => {
            console.log('click clack')
          }

          class App {
            handleRootNodeClick = () => {
              console.log('click') // eslint-disable-line no-console
            }

            componentDidMount() {
              this.rootNodeRef.addEventListener('click', this.handleRootNodeClick)
              this.rootNodeRef.addEventListener('clack', handleClickClack)
            }

            componentWillUnmount() {
              this.rootNodeRef.removeEventListener('click', this.handleRootNodeClick)
              this.rootNodeRef.removeEventListener('clack', handleClickClack)
            }

            render() {
              return (
                <div ref={node => this.rootNodeRef = node} />
              )
            }
          }
        """
        assert lint(code) == []

    def test_nested_target(self, lint):
        code = """
          class Panel {
            mount() {
              this.sub.node.addEventListener('scroll', this.onScroll)
            }
            unmount() {
              this.sub.node.removeEventListener('scroll', this.onScroll)
            }
          }
        """
        assert lint(code) == []

    def test_no_listeners(self, lint):
        assert lint("export default function App() { return null }") == []


# =========================================================================
# Missing removal
# =========================================================================

class TestMissingRemoval:
    def test_no_removal_at_all(self, lint):
        code = """
          class App {
            handleRootNodeClick = () => {
              console.log('click')
            }

            componentDidMount() {
              this.rootNodeRef.addEventListener('click', this.handleRootNodeClick)
            }

            render() {
              return (
                <div ref={node => this.rootNodeRef = node} />
              )
            }
          }
        """
        assert lint(code) == [
            "click on this.rootNodeRef does not have a corresponding removeEventListener",
        ]

    def test_removal_for_other_event(self, lint):
        code = """
          class App {
            componentDidMount() {
              this.rootNodeRef.addEventListener('click', this.handleRootNodeClick)
            }

            componentWillUnmount() {
              this.rootNodeRef.removeEventListener('keypress', this.handleRootNodeKeyPress)
            }
          }
        """
        assert lint(code) == [
            "click on this.rootNodeRef does not have a corresponding removeEventListener",
        ]

    def test_location_points_at_registration(self, lint_findings):
        code = "class A {\n  m() {\n    this.el.addEventListener('x', this.h)\n  }\n}\n"
        [finding] = lint_findings(code)
        assert (finding.line, finding.col) == (3, 4)
        assert finding.rule_id == "REMOVE_EVENT_LISTENER"
        assert finding.severity == "ERROR"
        assert finding.evidence == "this.el.addEventListener('x', this.h)"


# =========================================================================
# Mismatched handlers
# =========================================================================

class TestMismatch:
    def test_different_instance_handlers_on_window(self, lint):
        code = """
          class App {
            componentDidMount() {
              window.addEventListener('click', this.handleRootNodeClick)
            }

            componentWillUnmount() {
              window.removeEventListener('click', this.handleRootNodeKeyPress)
            }

            render() {
              return null
            }
          }
        """
        assert lint(code) == [
            "this.handleRootNodeClick and this.handleRootNodeKeyPress "
            "on undefined for click do not match",
        ]

    def test_different_named_handlers(self, lint):
        code = """
          const clickHandler = () => {
            console.log('click')
          }

          const anotherClickHandler = () => {
            console.log('click')
          }

          class App {
            componentDidMount() {
              this.rootNodeRef.addEventListener('click', clickHandler)
            }

            componentWillUnmount() {
              this.rootNodeRef.removeEventListener('click', anotherClickHandler)
            }
          }
        """
        assert lint(code) == [
            "clickHandler and anotherClickHandler on this.rootNodeRef for click do not match",
        ]

    def test_bind_masks_mismatch(self, lint):
        code = """
          class App {
            mount() { this.el.addEventListener('x', this.a.bind(this)) }
            unmount() { this.el.removeEventListener('x', this.b.bind(this)) }
          }
        """
        assert lint(code) == []


# =========================================================================
# Prohibited handlers
# =========================================================================

class TestProhibitedHandlers:
    def test_arrow_and_plain_function(self, lint):
        code = """
          class App {
            componentDidMount() {
              this.rootNodeRef.addEventListener('click', () => {
                console.log('click')
              })

              this.rootNodeRef.addEventListener('tap', function () {
                console.log('tap')
              })
            }

            componentWillUnmount() {
              this.rootNodeRef.removeEventListener('click', this.handleRootNodeClick)
              this.rootNodeRef.removeEventListener('tap', this.handleRootNodeTap)
            }
          }
        """
        assert lint(code) == [
            "event handler for click on this.rootNodeRef is arrow function "
            "arrow functions are prohibited as event handlers",
            "event handler for tap on this.rootNodeRef is plain function "
            "plain functions are prohibited as event handlers",
        ]

    def test_parenthesized_arrow(self, lint):
        code = """
          this.el.addEventListener('x', (() => {}))
          this.el.removeEventListener('x', this.h)
        """
        assert lint(code) == [
            "event handler for x on this.el is arrow function "
            "arrow functions are prohibited as event handlers",
        ]


# =========================================================================
# Waivers
# =========================================================================

class TestWaivers:
    CODE = """
      class App {
        mount() {
          this.el.addEventListener('click', this.onClick) // LISTENER_LINT_OK
          this.el.addEventListener('tap', this.onTap)
        }
      }
    """

    def test_waived_line_suppressed(self, lint):
        assert lint(self.CODE) == [
            "tap on this.el does not have a corresponding removeEventListener",
        ]

    def test_waivers_disabled(self, cfg, lint):
        cfg.honor_waivers = False
        assert len(lint(self.CODE)) == 2


# =========================================================================
# Nesting and large files
# =========================================================================

class TestNesting:
    def test_nested_registration_overwrites_outer(self, lint):
        # Outer call is visited first, so the nested one is the last write
        code = """
          this.el.addEventListener('click', wrap(this.el.addEventListener('click', onClick)))
          this.el.removeEventListener('click', onClick)
        """
        assert lint(code) == []

    def test_long_promise_chain(self, lint):
        chain = "fetchAll()" + "\n  .then(step)" * 1200 + ";\n"
        code = chain + "this.el.addEventListener('click', this.onClick)\n"
        assert lint(code) == [
            "click on this.el does not have a corresponding removeEventListener",
        ]
